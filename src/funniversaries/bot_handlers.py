from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from telegram import Update
from telegram.ext import CallbackContext, CommandHandler

from funniversaries.config_store import load_config
from funniversaries.date_logic import find_anniversaries
from funniversaries.entrypoints import ParseError, parse_reference_instant, render_anniversary
from funniversaries.models import SELECT_ALL, SELECT_FUTURE, SELECT_PAST, Anniversary
from funniversaries.settings import Settings

LOGGER = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096

SELECTOR_HEADINGS = {
    SELECT_FUTURE: "Upcoming anniversaries",
    SELECT_PAST: "Past anniversaries",
    SELECT_ALL: "All anniversaries",
}


@dataclass(frozen=True)
class HandlerDependencies:
    settings: Settings


def is_authorized(update: Update, settings: Settings) -> bool:
    effective_user = update.effective_user
    effective_chat = update.effective_chat
    if effective_user is None or effective_chat is None:
        return False
    return (
        effective_user.id == settings.telegram_allowed_user_id
        and effective_chat.id == settings.telegram_allowed_chat_id
    )


async def _deny_unauthorized(update: Update) -> None:
    if update.effective_message:
        await update.effective_message.reply_text("This bot is restricted to its configured owner.")


def _render_help() -> str:
    return (
        "Commands:\n"
        "/future DATE - Anniversaries from now on\n"
        "/past DATE - Anniversaries already behind us\n"
        "/all DATE - Every anniversary, past and future\n"
        "/counts - Show the configured magnitudes\n"
        "/help - Show this help message\n\n"
        "DATE is an RFC 3339 timestamp, for example:\n"
        "- 1989-06-19T00:00:00Z\n"
        "- 2010-01-02T03:04:05.250+01:00"
    )


def _render_anniversaries(selector: str, entries: list[Anniversary]) -> str:
    heading = SELECTOR_HEADINGS[selector]
    if not entries:
        return f"{heading}: none."

    lines = [f"{heading} ({len(entries)})"]
    lines.extend(render_anniversary(entry) for entry in entries)
    return "\n".join(lines)


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    chunks: list[str] = []
    current: list[str] = []
    current_length = 0

    pieces: list[str] = []
    for line in text.split("\n"):
        # Lines longer than the limit continue in the following chunk.
        pieces.extend(line[start : start + limit] for start in range(0, max(len(line), 1), limit))

    for piece in pieces:
        extra = len(piece) + (1 if current else 0)
        if current and current_length + extra > limit:
            chunks.append("\n".join(current))
            current = []
            current_length = 0
            extra = len(piece)
        current.append(piece)
        current_length += extra

    if current:
        chunks.append("\n".join(current))
    return chunks


async def _load_counts(update: Update, settings: Settings) -> list[int] | None:
    try:
        config = load_config(settings.anniversary_config_path)
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error("Could not load counts from %s: %s", settings.anniversary_config_path, exc)
        await update.effective_message.reply_text(
            "The anniversary counts configuration could not be loaded. Check the bot logs."
        )
        return None
    return config.counts


async def _reply_anniversaries(update: Update, context: CallbackContext, selector: str) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    settings = deps.settings
    if not is_authorized(update, settings):
        await _deny_unauthorized(update)
        return

    raw_text = " ".join(context.args or [])
    try:
        reference = parse_reference_instant(raw_text)
    except ParseError:
        await update.effective_message.reply_text(
            f"Usage: /{selector} DATE, e.g. /{selector} 1989-06-19T00:00:00Z"
        )
        return

    counts = await _load_counts(update, settings)
    if counts is None:
        return

    now = datetime.now(timezone.utc)
    entries = find_anniversaries(reference, now, selector, counts)
    LOGGER.info("Found %s %s anniversaries for %s", len(entries), selector, reference.isoformat())

    for chunk in split_message(_render_anniversaries(selector, entries)):
        await update.effective_message.reply_text(chunk)


async def help_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return
    await update.effective_message.reply_text(_render_help())


async def counts_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    settings = deps.settings
    if not is_authorized(update, settings):
        await _deny_unauthorized(update)
        return

    counts = await _load_counts(update, settings)
    if counts is None:
        return

    rendered = ", ".join(str(count) for count in counts)
    await update.effective_message.reply_text(f"Configured counts ({len(counts)}):\n{rendered}")


async def future_command(update: Update, context: CallbackContext) -> None:
    await _reply_anniversaries(update, context, SELECT_FUTURE)


async def past_command(update: Update, context: CallbackContext) -> None:
    await _reply_anniversaries(update, context, SELECT_PAST)


async def all_command(update: Update, context: CallbackContext) -> None:
    await _reply_anniversaries(update, context, SELECT_ALL)


def build_handlers() -> list:
    return [
        CommandHandler("help", help_command),
        CommandHandler("start", help_command),
        CommandHandler("counts", counts_command),
        CommandHandler(SELECT_FUTURE, future_command),
        CommandHandler(SELECT_PAST, past_command),
        CommandHandler(SELECT_ALL, all_command),
    ]
