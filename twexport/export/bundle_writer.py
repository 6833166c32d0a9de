"""Writer for exported translation projects."""

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..config import config
from ..errors import MissingInputError
from ..models.export_bundle import ExportBundle


class BundleWriter:
    """Writes an ExportBundle as a project directory of JSON files."""

    def __init__(self, projects_root: Optional[str] = None):
        self.projects_root = Path(projects_root or config.projects_root)

    def project_dir(self, project: str) -> Path:
        return self.projects_root / project

    def write(
        self,
        bundle: ExportBundle,
        project: str,
        progress_callback: Optional[Callable[[str, Path], None]] = None,
    ) -> List[Path]:
        """
        Write a bundle to "<projects_root>/<project>/".

        Args:
            bundle: The bundle to write
            project: Project name
            progress_callback: Called with (description, path) before each write

        Returns:
            Paths of the written files
        """
        root = self.project_dir(project)
        root.mkdir(parents=True, exist_ok=True)

        written = []
        for name, data in bundle.mappings():
            file_name, help_text = config.OUTPUT_FILES[name]
            path = root / file_name

            if progress_callback:
                progress_callback(help_text, path)

            with open(path, "w", encoding="utf-8") as f:
                f.write(self.to_string(data))
            written.append(path)

        return written

    def to_string(self, data: Dict[str, str]) -> str:
        """
        Convert one mapping to formatted JSON.

        Keys are sorted so repeated exports produce identical files.
        """
        return json.dumps(dict(sorted(data.items())), indent=2, ensure_ascii=False) + "\n"

    def read(self, project_dir: str) -> ExportBundle:
        """Read a previously written project directory back into a bundle."""
        root = Path(project_dir)
        mappings = {}
        for name, (file_name, _) in config.OUTPUT_FILES.items():
            path = root / file_name
            if not path.exists():
                raise MissingInputError(f"File not found: {path}")
            with open(path, "r", encoding="utf-8") as f:
                mappings[name] = json.load(f)
        return ExportBundle(**mappings)
