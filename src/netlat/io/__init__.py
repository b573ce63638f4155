from .edge_reader import EdgeListReader, read_network

__all__ = ["EdgeListReader", "read_network"]
