"""SchemaService — JSON Schema for every message family.

Schemas describe the wire (JSON) form: tagged objects, decimal-string
amounts and base64 binaries. ``export`` writes one file per message
family plus one ``response_to_<tag>.json`` per query.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from cw20kit.domain.execute import ExecuteMsg
from cw20kit.domain.instantiate import InstantiateMsg, MigrateMsg
from cw20kit.domain.query import QUERY_RESPONSES, QueryMsg
from cw20kit.services.base import BaseService
from cw20kit.services.result import ErrorCode, ServiceResult, failure
from cw20kit.services.telemetry import stage, timed

logger = logging.getLogger(__name__)

# pydantic emits $defs and #/$defs/ refs, which are 2020-12 keywords.
JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

SCHEMA_TARGETS: dict[str, tuple[str, Any]] = {
    "instantiate": ("InstantiateMsg", InstantiateMsg),
    "execute": ("ExecuteMsg", ExecuteMsg),
    "query": ("QueryMsg", QueryMsg),
    "migrate": ("MigrateMsg", MigrateMsg),
}


def build_schema(title: str, target: Any) -> dict[str, Any]:
    """Generate the wire JSON Schema for *target* titled *title*."""
    schema = TypeAdapter(target).json_schema()
    return {"$schema": JSON_SCHEMA_DIALECT, **schema, "title": title}


class SchemaService(BaseService):
    """Generate and export JSON Schemas for the message contract."""

    @timed
    def show(self, kind: str) -> ServiceResult:
        """Return the schema for one message family."""
        op = "schema_show"
        entry = SCHEMA_TARGETS.get(kind)
        if entry is None:
            return failure(
                op,
                ErrorCode.UNKNOWN_SCHEMA,
                f"Unknown schema kind: {kind}",
                available=sorted(SCHEMA_TARGETS),
            )
        title, target = entry
        with stage("generate"):
            schema = build_schema(title, target)
        return ServiceResult(ok=True, op=op, data={"kind": kind, "schema": schema})

    @timed
    def export(self, output_dir: Path | None = None) -> ServiceResult:
        """Write every message and response schema into *output_dir*.

        Defaults to ``[export] output_dir`` resolved against the project root.
        """
        op = "schema_export"
        target_dir = output_dir or self._settings.project_root / self._settings.export.output_dir
        indent = self._settings.export.indent

        documents: dict[str, dict[str, Any]] = {}
        with stage("generate"):
            for kind, (title, target) in SCHEMA_TARGETS.items():
                documents[f"{kind}_msg.json"] = build_schema(title, target)
            for tag, response in QUERY_RESPONSES.items():
                documents[f"response_to_{tag}.json"] = build_schema(response.__name__, response)

        written: list[str] = []
        with stage("write"):
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
                for filename, schema in documents.items():
                    path = target_dir / filename
                    path.write_text(json.dumps(schema, indent=indent) + "\n", encoding="utf-8")
                    written.append(filename)
            except OSError as exc:
                logger.warning("Schema export to %s failed: %s", target_dir, exc)
                return failure(
                    op,
                    ErrorCode.WRITE_FAILED,
                    f"Cannot write schemas to {target_dir}: {exc}",
                    output_dir=str(target_dir),
                    written=written,
                )

        logger.debug("Exported %d schema files to %s", len(written), target_dir)
        return ServiceResult(
            ok=True,
            op=op,
            data={"output_dir": str(target_dir), "files": written, "count": len(written)},
        )
