"""Form choosing where the rendered image is exported to."""

from __future__ import annotations

from pathtrace.viewer.state import EventFlags, PanelState

_FIELD_LIMIT = 255


class ExportForm:
    """Directory and file name of an export, submitted as a request to the viewport."""

    def __init__(
        self,
        flags: EventFlags | None = None,
        state: PanelState | None = None,
        directory: str = "./",
        filename: str = "output.png",
    ) -> None:
        self.flags = flags if flags is not None else EventFlags()
        self.state = state if state is not None else PanelState()
        self.directory = directory[:_FIELD_LIMIT]
        self.filename = filename[:_FIELD_LIMIT]

    def choose_directory(self, directory: str) -> None:
        """Use the given directory for the export."""
        self.directory = str(directory)[:_FIELD_LIMIT]

    def export_path(self) -> str:
        """Path the image will be written to."""
        return f"{self.directory}/{self.filename}"

    def submit(self) -> str:
        """Request the export and return the path it goes to."""
        path = self.export_path()
        self.flags.export_to_image = True
        self.state.export_filepath = path
        return path