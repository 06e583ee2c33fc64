"""Template manager for bundled sample quotation files."""

from __future__ import annotations

from importlib import resources
from pathlib import Path


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "wardrobe": "Single bedroom wardrobe in MDF",
    "kitchen": "Modular kitchen with base and wall cabinets",
    "living-room": "TV unit and shoe rack",
}


class TemplateManager:
    """Lists bundled quotation templates and copies them into new files.

    Example:
        manager = TemplateManager()
        manager.init_template("kitchen", Path("my-kitchen.json"))
    """

    def __init__(self) -> None:
        self._data_package = "interiors.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all bundled templates.

        Returns:
            List of (name, description) tuples in display order.
        """
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: Template name (wardrobe, kitchen, living-room).

        Returns:
            The template file content as a string.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)
        try:
            return resources.files(self._data_package).joinpath(f"{name}.json").read_text(
                encoding="utf-8"
            )
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to a new quotation file.

        Args:
            name: Template name to copy.
            output_path: Destination file; overwritten if present.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        output_path.write_text(self.get_template(name), encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
