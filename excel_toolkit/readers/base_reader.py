"""Abstract grid reader interface for pluggable spreadsheet decoders."""
from abc import ABC, abstractmethod
from pathlib import Path

from excel_toolkit.models.grid import Grid


class GridReader(ABC):
    """Abstract base class for spreadsheet decoders.
    
    A reader turns a validated source file into the grid of its first
    worksheet. The importer never looks inside the container itself, so
    new formats can be supported by supplying another reader.
    
    Implementations must provide:
    - read(): Decode the first worksheet into a Grid
    - get_reader_name(): Return unique reader identifier
    """
    
    @abstractmethod
    def read(self, path: Path) -> Grid:
        """Decode the first worksheet of a spreadsheet.
        
        Args:
            path: Path to a source that already passed the file guards
        
        Returns:
            Grid of optional text cells, in row order
        
        Raises:
            UnsupportedFormatError: If the file cannot be decoded
        """
        pass
    
    @abstractmethod
    def get_reader_name(self) -> str:
        """Return unique identifier for this reader (e.g., "excel")."""
        pass
