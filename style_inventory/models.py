# models.py

from dataclasses import dataclass

DEFAULT_EXTENSIONS = ("php", "html")


@dataclass(frozen=True)
class ElementRecord:
    tag: str
    class_attr: str
    inline_style: str = ""
    source_file: str = ""


def element_key(record: ElementRecord) -> str:
    """Dedup key: tag plus the raw class attribute, exactly as written."""
    return f"{record.tag}::{record.class_attr}"


@dataclass
class AuditConfig:
    directory: str
    project_root: str | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    output: str | None = None

    def __post_init__(self):
        # Stylesheet hrefs resolve against the scan root unless told otherwise
        if not self.project_root:
            self.project_root = self.directory
        self.extensions = tuple(ext.lstrip('.') for ext in self.extensions)
