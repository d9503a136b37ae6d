"""Space-efficient rank/select, packed storage, Dyck matching, segment stacks and trail structures."""

__version__ = "0.1.0"