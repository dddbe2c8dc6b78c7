"""External semantic parser: schema text in, DMMF document out.

The linter never parses Prisma structure itself.  A parser is any callable
``(schema_text) -> DmmfDocument`` that raises :class:`SchemaParseError` when
the schema is rejected; it is injected into the context builder so tests can
substitute canned documents.
"""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from prismalint.exceptions import SchemaParseError
from prismalint.models.dmmf import DmmfDocument

logger = logging.getLogger("prismalint.parser")

# Reads the schema from stdin and prints the DMMF as JSON.
_GET_DMMF_SCRIPT = """
const { getDMMF } = require('@prisma/internals');
let datamodel = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', (chunk) => { datamodel += chunk; });
process.stdin.on('end', async () => {
  try {
    const dmmf = await getDMMF({ datamodel });
    process.stdout.write(JSON.stringify(dmmf));
  } catch (error) {
    process.stderr.write(String((error && error.message) || error));
    process.exit(1);
  }
});
"""


class SchemaParser(Protocol):
    def __call__(self, schema_text: str) -> DmmfDocument: ...


def parse_dmmf(payload: str | dict[str, Any]) -> DmmfDocument:
    """Validate a DMMF payload (JSON text or decoded dict)."""
    try:
        data = json.loads(payload) if isinstance(payload, str) else payload
        return DmmfDocument.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise SchemaParseError(f"Invalid DMMF payload: {exc}") from exc


class NodeDmmfParser:
    """Obtain the DMMF by running ``getDMMF`` from ``@prisma/internals`` in Node.

    *cwd* must be a directory from which ``require('@prisma/internals')``
    resolves (usually the project root holding ``node_modules``).
    """

    def __init__(
        self,
        node_binary: str = "node",
        cwd: str | Path | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._node_binary = node_binary
        self._cwd = Path(cwd) if cwd is not None else None
        self._timeout = timeout

    def __call__(self, schema_text: str) -> DmmfDocument:
        try:
            completed = subprocess.run(
                [self._node_binary, "-e", _GET_DMMF_SCRIPT],
                input=schema_text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                cwd=self._cwd,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise SchemaParseError(f"Node binary not found: {self._node_binary}") from exc
        except subprocess.TimeoutExpired as exc:
            raise SchemaParseError(
                f"Schema parser timed out after {self._timeout:g}s"
            ) from exc

        if completed.returncode != 0:
            message = completed.stderr.strip() or f"exit status {completed.returncode}"
            logger.debug("getDMMF rejected schema: %s", message)
            raise SchemaParseError(message)
        return parse_dmmf(completed.stdout)
