from .metrics import CompressionStats, compression_stats, rows_match

__all__ = ["CompressionStats", "compression_stats", "rows_match"]
