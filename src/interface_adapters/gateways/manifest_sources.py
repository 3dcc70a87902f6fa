import logging
from collections.abc import Mapping
from pathlib import Path

from src.use_cases.errors import MissingManifestAttributeError
from src.use_cases.ports import ManifestSource


def parse_manifest(text: str) -> dict[str, str]:
    """Parse the main section of a JAR-style manifest.

    Attributes are ``Name: value`` lines; a line starting with a single space
    continues the previous value. The main section ends at the first blank line.
    Lines that are not attributes are skipped.
    """
    attributes: dict[str, str] = {}
    last_name: str | None = None
    for raw_line in text.splitlines():
        if not raw_line.strip():
            if attributes:
                break
            continue

        if raw_line.startswith(" "):
            if last_name is not None:
                attributes[last_name] += raw_line[1:]
            continue

        if ":" not in raw_line:
            last_name = None
            continue

        name, value = raw_line.split(":", 1)
        name = name.strip()
        if not name:
            last_name = None
            continue
        attributes[name] = value[1:] if value.startswith(" ") else value
        last_name = name

    return attributes


class InMemoryManifestSource(ManifestSource):
    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = {name.lower(): value for name, value in entries.items()}

    def exists(self, name: str) -> bool:
        return name.lower() in self._entries

    def read(self, name: str) -> str:
        try:
            return self._entries[name.lower()]
        except KeyError:
            raise MissingManifestAttributeError(name) from None


class FileManifestSource(InMemoryManifestSource):
    def __init__(self, manifest_path: Path, logger: logging.Logger) -> None:
        self._manifest_path = manifest_path
        self._logger = logger
        super().__init__(self._load_entries())

    def _load_entries(self) -> dict[str, str]:
        if not self._manifest_path.exists():
            self._logger.info("No manifest found at %s", self._manifest_path)
            return {}

        try:
            text = self._manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            self._logger.exception("Could not read manifest at %s", self._manifest_path)
            return {}

        entries = parse_manifest(text)
        if not entries:
            self._logger.warning("Manifest at %s has no attributes", self._manifest_path)
        else:
            self._logger.info(
                "Manifest loaded from %s. Attributes: %s",
                self._manifest_path,
                ", ".join(sorted(entries)),
            )
        return entries
