"""Regrouping and joining of chunked archive entries."""

from unyek.reconstruction.reconstructor import Reconstructor, split_chunk_path

__all__ = ["Reconstructor", "split_chunk_path"]
