"""Task-name renames applied before matching."""

from __future__ import annotations

from hardscape.reference.excavation import DIGGING_TEMPLATE_NAMES, DiggingMethod

FOUNDATION_EXCAVATION = "foundation excavation"
CUTTING_SLABS = "cutting slabs"

# Parent keyword -> specific cutting task, checked in order.
CUTTING_VARIANTS: tuple[tuple[str, str], ...] = (
    ("porcelain", "cutting porcelain"),
    ("sandstone", "cutting sandstones"),
)


def resolve_task_name(
    task_name: str,
    parent_name: str | None = None,
    digging_method: DiggingMethod | str | None = None,
) -> str:
    """
    Return the catalog-facing name for a calculator task.

    ``Foundation Excavation`` becomes the digging-method template name (shovel when unknown);
    ``cutting slabs`` becomes ``cutting porcelain`` or ``cutting sandstones`` when the parent
    task mentions that material. Other names pass through unchanged.
    """

    key = task_name.strip().lower()
    if key == FOUNDATION_EXCAVATION:
        try:
            method = DiggingMethod(digging_method) if digging_method else DiggingMethod.SHOVEL
        except ValueError:
            method = DiggingMethod.SHOVEL
        return DIGGING_TEMPLATE_NAMES[method]
    if key == CUTTING_SLABS and parent_name:
        parent = parent_name.lower()
        for keyword, renamed in CUTTING_VARIANTS:
            if keyword in parent:
                return renamed
    return task_name


__all__ = ["FOUNDATION_EXCAVATION", "CUTTING_SLABS", "CUTTING_VARIANTS", "resolve_task_name"]
