"""Bone hierarchies and their local-to-world matrices.

Bones form a tree through first-child and next-sibling links; bone 0 is the
root. Each animation frame holds the root position first, followed by one
rotation quaternion per bone.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Optional, Protocol

from fixengine.quaternion import Matrix, Quaternion, quaternion_to_matrix

__all__ = ["NO_BONE", "Bone", "Skeleton"]

NO_BONE = 0xFFFF


class _Position(Protocol):
    vx: int
    vy: int
    vz: int


@dataclass(frozen=True)
class Bone:
    """One bone: its bind matrix, tree links and the vertices it moves."""

    matrix_idx: int
    first_child: int = NO_BONE
    next_sibling: int = NO_BONE
    vertex_start: int = 0
    vertex_count: int = 0

    @property
    def has_child(self) -> bool:
        return self.first_child != NO_BONE

    @property
    def has_sibling(self) -> bool:
        return self.next_sibling != NO_BONE


class Skeleton:
    """A bone tree with the matrices its bones refer to."""

    def __init__(self, bones: Sequence[Bone], matrices: Sequence[Matrix]) -> None:
        if not bones:
            raise ValueError("a skeleton needs at least one bone")
        self.bones = tuple(bones)
        self.matrices = tuple(matrices)
        count = len(self.bones)
        for index, bone in enumerate(self.bones):
            if not 0 <= bone.matrix_idx < len(self.matrices):
                raise ValueError(f"bone {index} refers to missing matrix {bone.matrix_idx}")
            for link in (bone.first_child, bone.next_sibling):
                if link != NO_BONE and not 0 <= link < count:
                    raise ValueError(f"bone {index} links to missing bone {link}")

    def walk(self) -> Iterator[tuple[int, Optional[int]]]:
        """Yield ``(bone, parent)`` depth first: a bone, its children, then its siblings.

        The root chain has no parent. Raises ValueError on a cyclic hierarchy.
        """
        seen: set[int] = set()
        # Each entry is (bone to visit, its parent).
        pending: list[tuple[int, Optional[int]]] = [(0, None)]
        while pending:
            index, parent = pending.pop()
            if index in seen:
                raise ValueError(f"bone {index} is reached twice")
            seen.add(index)
            yield index, parent
            bone = self.bones[index]
            if bone.has_sibling:
                pending.append((bone.next_sibling, parent))
            if bone.has_child:
                pending.append((bone.first_child, index))

    def to_world(
        self, base: Matrix, anim: Sequence[_Position | Quaternion]
    ) -> list[Optional[Matrix]]:
        """Local-to-world matrix of every bone for one animation frame.

        ``anim[0]`` is the root position and ``anim[i + 1]`` the rotation of
        bone ``i``. The root takes its translation from the frame, other
        bones from their bind matrix. Bones not reached from the root stay
        ``None``.
        """
        out: list[Optional[Matrix]] = [None] * len(self.bones)
        root = anim[0] if anim else None
        if root is None:
            raise ValueError("animation frame has no root position")
        for index, parent in self.walk():
            if index + 1 >= len(anim):
                raise ValueError(f"animation frame has no rotation for bone {index}")
            rotation = anim[index + 1]
            if not isinstance(rotation, Quaternion):
                raise TypeError(f"rotation for bone {index} is not a quaternion")
            local = quaternion_to_matrix(rotation)
            if index == 0:
                translation = (root.vx, root.vy, root.vz)
            else:
                translation = self.matrices[self.bones[index].matrix_idx].t
            local = replace(local, t=tuple(translation))
            parent_matrix = base if parent is None else out[parent]
            out[index] = parent_matrix.compose(local)
        return out