"""Core CBOM pipeline: path resolution, validation, flattening, indexing, normalization."""
