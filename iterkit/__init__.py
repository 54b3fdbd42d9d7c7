"""Iterator helpers: position-based slicing, k smallest items, k-way merging and lazy buffering."""

__version__ = "0.1.0"
__all__ = ["iter_index", "k_smallest", "kmerge", "lazy_buffer"]