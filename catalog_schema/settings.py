"""Frozen run settings threaded through every generation step."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from catalog_schema.load_config import DEFAULT_CONFIG

STATIC_DIR = Path(__file__).parent / "static"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for one schema generation run."""

    source: Path
    dest: Path
    editor: bool = DEFAULT_CONFIG["output"]["editor"]
    quiet: bool = False
    json_indent: int = DEFAULT_CONFIG["output"]["json_indent"]
    workers: int = DEFAULT_CONFIG["output"]["workers"]
    models_dir: str = DEFAULT_CONFIG["source"]["models_dir"]
    include_pattern: str = DEFAULT_CONFIG["source"]["include_pattern"]
    exclude_pattern: str = DEFAULT_CONFIG["source"]["exclude_pattern"]
    static_dir: Path = STATIC_DIR
    root_class: str = DEFAULT_CONFIG["classes"]["root"]
    item_class: str = DEFAULT_CONFIG["classes"]["item"]
    group_class: str = DEFAULT_CONFIG["classes"]["group"]
    define_properties: str = DEFAULT_CONFIG["classes"]["define_properties"]
    inherit: str = DEFAULT_CONFIG["classes"]["inherit"]
    default_properties: tuple[str, ...] = tuple(DEFAULT_CONFIG["default_properties"])
    acronyms: frozenset[str] = frozenset(DEFAULT_CONFIG["acronyms"])

    @property
    def models_path(self) -> Path:
        """Directory holding the catalog class sources."""
        return self.source / self.models_dir

    @classmethod
    def from_config(
        cls, config: dict[str, Any], args: argparse.Namespace | None = None
    ) -> "Settings":
        """Build settings from a merged config, letting CLI arguments win.

        Keys missing from ``config`` fall back to the field defaults above.
        """
        source_cfg = config.get("source", {})
        classes = config.get("classes", {})
        output = config.get("output", {})

        editor = output.get("editor", cls.editor)
        json_indent = output.get("json_indent", cls.json_indent)
        workers = output.get("workers", cls.workers)
        quiet = cls.quiet
        source = Path(".")
        dest = Path("schema")
        if args is not None:
            source = Path(args.source)
            dest = Path(args.dest)
            editor = editor or getattr(args, "editor", False)
            quiet = getattr(args, "quiet", cls.quiet)
            if getattr(args, "json_indent", None) is not None:
                json_indent = args.json_indent
            if getattr(args, "workers", None) is not None:
                workers = args.workers

        static_dir = source_cfg.get("static_dir")
        acronyms = config.get("acronyms")
        return cls(
            source=source,
            dest=dest,
            editor=bool(editor),
            quiet=bool(quiet),
            json_indent=int(json_indent),
            workers=max(1, int(workers)),
            models_dir=source_cfg.get("models_dir", cls.models_dir),
            include_pattern=source_cfg.get("include_pattern", cls.include_pattern),
            exclude_pattern=source_cfg.get("exclude_pattern", cls.exclude_pattern),
            static_dir=Path(static_dir) if static_dir else cls.static_dir,
            root_class=classes.get("root", cls.root_class),
            item_class=classes.get("item", cls.item_class),
            group_class=classes.get("group", cls.group_class),
            define_properties=classes.get("define_properties", cls.define_properties),
            inherit=classes.get("inherit", cls.inherit),
            default_properties=tuple(config.get("default_properties", cls.default_properties)),
            acronyms=(
                frozenset(a.upper() for a in acronyms) if acronyms is not None else cls.acronyms
            ),
        )
