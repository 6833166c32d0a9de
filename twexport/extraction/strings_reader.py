"""Reader for the extractor's JSON string cache."""

import json
from typing import Dict, Any
from pathlib import Path

from ..errors import MissingInputError
from ..models.string_record import UsageSite, StringRecord


class StringsCacheReader:
    """Reader for i18n_strings.json files written by the extractor."""

    def read(self, file_path: str) -> Dict[str, StringRecord]:
        """
        Read a string cache and return its records in file order.

        Args:
            file_path: Path to the i18n_strings.json file

        Returns:
            Mapping of raw string to StringRecord

        Raises:
            MissingInputError: If the file is missing or not a JSON object
        """
        path = Path(file_path)
        if not path.exists():
            raise MissingInputError(
                f'Expected library string extraction to generate file "{file_path}", '
                f"but no such file exists!"
            )

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        return self.read_string(content, source=file_path)

    def read_string(self, content: str, source: str = "<string>") -> Dict[str, StringRecord]:
        """
        Read cache content from a string.

        Args:
            content: JSON string content
            source: Name used in error messages

        Returns:
            Mapping of raw string to StringRecord
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise MissingInputError(f"Unable to decode string data in {source}: {e}") from e

        if not isinstance(data, dict):
            raise MissingInputError(f"Expected a JSON object of strings in {source}")

        return self._parse_data(data, source)

    def _parse_data(self, data: Dict[str, Any], source: str) -> Dict[str, StringRecord]:
        """Parse the JSON data structure into our model."""
        records = {}
        for string, spec in data.items():
            try:
                records[string] = self._parse_record(string, spec or {})
            except (KeyError, TypeError, ValueError) as e:
                raise MissingInputError(
                    f"Malformed string record {string!r} in {source}: {e!r}"
                ) from e
        return records

    def _parse_record(self, string: str, spec: Dict[str, Any]) -> StringRecord:
        """Parse a single string entry."""
        if not isinstance(spec, dict):
            raise TypeError(f"expected an object, got {type(spec).__name__}")

        uses = []
        for use in spec.get("uses") or []:
            if not isinstance(use, dict):
                raise TypeError(f"expected a usage object, got {type(use).__name__}")
            uses.append(UsageSite(file=str(use["file"]), line=int(use["line"])))
        return StringRecord(string=string, uses=uses)
