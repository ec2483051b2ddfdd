from .meta import PostMeta, TermMeta
from .post import Post

__all__ = [
    "Post",
    "PostMeta",
    "TermMeta",
]
