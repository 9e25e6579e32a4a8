"""
Message composer. Turns a generation request plus its resolved offenses into
the final report text.

Template branch is pure: same request, same offenses, same clock → same text.
AI branch hands a prompt to a text generator exactly once; an empty reply is
replaced by FALLBACK_MESSAGE, but a generator exception is left to propagate.
"""
import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from ia_console.config import settings
from ia_console.exceptions import TextGenerationError
from ia_console.models.offense import Offense
from ia_console.schemas import GenerationRequest

logger = logging.getLogger(__name__)

TextGenerator = Callable[[str], str | None]

REPORT_TITLE = "**IA Action Report**"
FALLBACK_MESSAGE = "Failed to generate AI message."

_AI_PROMPT = """You are an Internal Affairs officer in a roleplay server.
Generate a formal and professional {action} message.

Details:
HR ID: {hr_id}
User ID: {user_id}
Ticket Number: {ticket}
Duration: {duration}
Action: {action}
Offenses:
{offenses}
Notes: {notes}

Format the output clearly. Do not include introductory text, just the message."""


def format_offense_lines(offenses: Sequence[Offense]) -> str:
    return "\n".join(f"- {o.code} {o.description} ({o.punishment})" for o in offenses)


def format_report_date(now: datetime) -> str:
    if settings.report_date_format:
        return now.strftime(settings.report_date_format)
    return f"{now.month}/{now.day}/{now.year}"


def render_template(req: GenerationRequest, offenses: Sequence[Offense], now: datetime) -> str:
    lines = [
        REPORT_TITLE,
        "",
        f"**HR ID:** {req.hr_id}",
        f"**Target User ID:** {req.user_id}",
        f"**Ticket:** {'#' + req.ticket_number if req.ticket_number else ''}",
        f"**Date:** {format_report_date(now)}",
        f"**Action:** {req.action.value}",
        f"**Duration:** {req.duration or ''}",
        "",
        "**Offenses:**",
        format_offense_lines(offenses),
    ]
    if req.notes:
        lines += ["", "**Notes:**", req.notes]
    return "\n".join(lines).strip()


def build_ai_prompt(req: GenerationRequest, offenses: Sequence[Offense]) -> str:
    return _AI_PROMPT.format(
        action=req.action.value,
        hr_id=req.hr_id,
        user_id=req.user_id,
        ticket=req.ticket_number or "N/A",
        duration=req.duration or "N/A",
        offenses=format_offense_lines(offenses) or "None",
        notes=req.notes or "None",
    )


def compose(
    req: GenerationRequest,
    offenses: Sequence[Offense],
    *,
    now: datetime | None = None,
    text_generator: TextGenerator | None = None,
) -> str:
    if not req.use_ai:
        return render_template(req, offenses, now or datetime.now())

    if text_generator is None:
        raise TextGenerationError("AI-assisted message requested but no text generator is configured")

    text = text_generator(build_ai_prompt(req, offenses))
    if not text or not text.strip():
        logger.warning("Text generator returned no usable content for hr=%s user=%s, using fallback",
                       req.hr_id, req.user_id)
        return FALLBACK_MESSAGE
    return text.strip()
