"""Generator configuration — everything a run needs besides the schema itself.

The CLI resolves its flags into a single GeneratorConfig and passes it down
to the renderer and writer, so rendering stays a pure function of the
collection and this object.

Two output variants are supported:

- ``document`` wraps every interface around Appwrite's ``Models.Document``
  base and emits the system ``$sequence`` field first::

    import { Models } from 'appwrite';

    export interface Users extends Models.Document {
      $sequence: number;
      email: string;
    }

- ``plain`` emits standalone interfaces with only the user attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

VARIANTS = ("document", "plain")

DEFAULT_DOCUMENT_ATTRIBUTES: dict[str, str] = {
    "$sequence": "number",
}


@dataclass
class GeneratorConfig:
    """Resolved options for one generation run.

    Attributes:
        input_arg: The ``--input`` value exactly as given on the command
            line.  Echoed into the regeneration hint of every file.
        output_arg: The ``--output`` value exactly as given.
        input_path: Absolute path of the schema file.
        output_dir: Absolute root directory for generated files.
        variant: ``"document"`` or ``"plain"``.
        extension: File extension of generated interfaces.
        fallback_type: Type emitted for unknown or unresolvable attributes.
        extra_options: Unrecognised ``--key=value`` flags, kept but unused.
    """

    input_arg: str
    output_arg: str
    input_path: Path
    output_dir: Path
    variant: str = "document"
    extension: str = ".ts"
    fallback_type: str = "any"
    extra_options: dict[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.variant not in VARIANTS:
            raise ValueError(
                f"Unknown variant {self.variant!r}, expected one of {', '.join(VARIANTS)}"
            )

    @classmethod
    def from_args(
        cls,
        input_arg: str,
        output_arg: str,
        *,
        cwd: str | Path | None = None,
        **kwargs,
    ) -> GeneratorConfig:
        """Build a config, resolving both paths against ``cwd`` (default: process cwd)."""
        base = Path(cwd) if cwd is not None else Path.cwd()
        return cls(
            input_arg=input_arg,
            output_arg=output_arg,
            input_path=(base / input_arg).resolve(),
            output_dir=(base / output_arg).resolve(),
            **kwargs,
        )

    @property
    def extends_document(self) -> bool:
        return self.variant == "document"

    @property
    def default_attributes(self) -> dict[str, str]:
        if self.extends_document:
            return dict(DEFAULT_DOCUMENT_ATTRIBUTES)
        return {}
