"""Helpers for slash-separated content paths."""


class PathHelper:
    """Static helpers for joining and splitting paths like "Root/Sites/Default_Site"."""

    @staticmethod
    def trim_slashes(path: str) -> str:
        """Remove leading and trailing slashes."""
        return path.strip("/")

    @classmethod
    def join_paths(cls, *args: str) -> str:
        """Join path segments with a single slash, trimming slashes around each."""
        return "/".join(cls.trim_slashes(arg) for arg in args)

    @classmethod
    def is_ancestor_of(cls, ancestor_path: str, descendant_path: str) -> bool:
        """Check if descendant_path is below ancestor_path."""
        return cls.trim_slashes(descendant_path).startswith(cls.join_paths(ancestor_path) + "/")

    @classmethod
    def get_segments(cls, path: str) -> list[str]:
        """Split a path into its non-empty segments."""
        return [segment for segment in cls.trim_slashes(path).split("/") if segment]

    @classmethod
    def get_parent_path(cls, path: str) -> str:
        """
        Get the parent of a path.

        The root segment is its own parent: get_parent_path("Root") == "Root".
        """
        segments = cls.get_segments(path)
        if len(segments) <= 1:
            return cls.trim_slashes(path)
        return cls.join_paths(*segments[:-1])
