from __future__ import annotations

import html
import re
from datetime import datetime, timezone

from mastodon_client.models import Notification, Status

_TAG_RE = re.compile(r"<[^>]+>")
_BREAK_RE = re.compile(r"<br\s*/?>|</p>\s*<p>", re.IGNORECASE)


def format_list_timestamp(value: datetime | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M")


def strip_html(content: str) -> str:
    text = _BREAK_RE.sub("\n", content or "")
    text = _TAG_RE.sub("", text)
    return html.unescape(text).strip()


def format_status(status: Status) -> str:
    if status.reblog is not None:
        return f"@{status.account.acct} boosted " + format_status(status.reblog)
    text = strip_html(status.content)
    if status.spoiler_text:
        text = f"[CW: {status.spoiler_text}] {text}"
    return f"@{status.account.acct} ({format_list_timestamp(status.created_at)}) #{status.id}: {text}"


def format_notification(notification: Notification) -> str:
    line = f"{notification.notification_type} from @{notification.account.acct}"
    if notification.status is not None:
        line += f": {strip_html(notification.status.content)}"
    return line
