"""Per-owner storage statistics."""

from dataclasses import dataclass, field

from profilehub.domain.files.value_objects.file_enums import FileCategory


@dataclass(frozen=True)
class CategoryStats:
    category: FileCategory
    count: int
    total_size_bytes: int


@dataclass(frozen=True)
class FileStats:
    """Totals over all files of one owner, broken down by category.

    ``by_category`` only lists categories that have at least one file,
    ordered by category name.
    """

    total_files: int = 0
    total_size_bytes: int = 0
    by_category: tuple[CategoryStats, ...] = field(default_factory=tuple)

    @classmethod
    def from_categories(cls, categories: list[CategoryStats]) -> "FileStats":
        ordered = tuple(sorted(categories, key=lambda c: c.category.value))
        return cls(
            total_files=sum(c.count for c in ordered),
            total_size_bytes=sum(c.total_size_bytes for c in ordered),
            by_category=ordered,
        )
