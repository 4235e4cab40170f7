from .chunking import Chunk, split_text

__all__ = ["Chunk", "split_text"]
