"""
TeaCodec Report Generator
==========================

Writes codec results and key table summaries as JSON documents for
scripts and pipelines that consume the CLI's output.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from teacodec import __tool_name__, __version__


class CodecReportGenerator:
    """Serialise codec models to JSON.

    Usage::

        reporter = CodecReportGenerator()
        text = reporter.to_json(codec.transform(Operation.ENCODE, "abc"))
        reporter.generate_json(codec.describe(), Path("table.json"))
    """

    def build(self, payload: BaseModel) -> dict[str, Any]:
        """Wrap *payload* with report metadata."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": __tool_name__,
                "version": __version__,
                "kind": type(payload).__name__,
            },
            "data": payload.model_dump(mode="json"),
        }

    def to_json(self, payload: BaseModel) -> str:
        return json.dumps(self.build(payload), indent=2, ensure_ascii=False)

    def generate_json(self, payload: BaseModel, output_path: Path) -> Path:
        """Write *payload* to *output_path* and return the path.

        Parent directories are created as needed.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(payload), encoding="utf-8")
        return output_path
