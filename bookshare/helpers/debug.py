"""Transcripts of HTTP exchanges, written to a debug directory when one is configured."""

from __future__ import annotations

from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Any


def save_transcript(
    debug_dir: Path | None,
    call_name: str,
    method: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
    status: int | None = None,
    response_text: str = "",
    error: BaseException | None = None,
) -> Path | None:
    """Save one request and its outcome (response or transport error)."""
    if debug_dir is None:
        return None
    debug_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    path = debug_dir / f"{ts}_{call_name}"

    parts = [f"=== REQUEST ===\n{method} {url}"]
    if params:
        parts.append(f"=== PARAMS ===\n{json.dumps(params, ensure_ascii=False, default=str)}")
    if body:
        parts.append(f"=== BODY ===\n{json.dumps(body, indent=2, ensure_ascii=False, default=str)}")
    if error is not None:
        parts.append(f"=== ERROR ===\n{type(error).__name__}: {error}")
    else:
        parts.append(f"=== RESPONSE {status} ===\n{response_text}")

    path.write_text("\n\n".join(parts) + "\n")
    return path
