"""Skyline bottom-left rectangle packing, e.g. for texture atlases (no rotation)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

MAXVAL = 0x7FFFFFFF
"""Largest supported coordinate; rectangles that fail to pack get this as x and y."""

_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """How the packer picks a position for each rectangle."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    SKYLINE_DEFAULT = 0


@dataclass
class PackRect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in by the packer."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


class _Node:
    __slots__ = ("x", "y", "next")

    def __init__(self, x: int = 0, y: int = 0, next: Optional[_Node] = None) -> None:
        self.x = x
        self.y = y
        self.next = next


class Packer:
    """Packs rectangles into a ``width`` x ``height`` target using ``num_nodes`` skyline nodes."""

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        if width < 0 or height < 0:
            raise ValueError("target dimensions must not be negative")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT

        free: Optional[_Node] = None
        for _ in range(num_nodes):
            free = _Node(next=free)
        self._free_head = free

        # The dummy head's ``next`` is the active skyline; the last node is a
        # sentinel at the full width so node widths need not be stored.
        sentinel = _Node(width, _SENTINEL_Y)
        self._head = _Node(next=_Node(0, 0, sentinel))
        self.allow_out_of_mem(False)

    def allow_out_of_mem(self, allow: bool) -> None:
        """Allow unquantised widths, which pack better but may run out of nodes."""
        if allow:
            self._align = 1
        else:
            self._align = max(1, (self.width + self.num_nodes - 1) // self.num_nodes)

    def set_heuristic(self, heuristic: int) -> None:
        """Select the placement heuristic; raises ``ValueError`` for an unknown one."""
        self.heuristic = Heuristic(heuristic)

    def _find_min_y(self, first: _Node, x0: int, width: int) -> Tuple[int, int]:
        node: Optional[_Node] = first
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        while node is not None and node.x < x1:
            assert node.next is not None
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += node.next.x - x0
                else:
                    visited += node.next.x - node.x
            else:
                under = node.next.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            node = node.next
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> Tuple[Optional[_Node], int, int]:
        width = width + self._align - 1
        width -= width % self._align

        if width > self.width or height > self.height:
            return None, 0, 0

        best_waste = _SENTINEL_Y
        best_y = _SENTINEL_Y
        best: Optional[_Node] = None

        prev = self._head
        node = prev.next
        while node is not None and node.x + width <= self.width:
            y, waste = self._find_min_y(node, node.x, width)
            if self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT:
                if y < best_y:
                    best_y = y
                    best = prev
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = prev
            prev = node
            node = node.next

        best_x = best.next.x if best is not None and best.next is not None else 0

        if self.heuristic == Heuristic.SKYLINE_BF_SORT_HEIGHT:
            # Also try aligning the right edge to each skyline step.
            prev = self._head
            node = prev.next
            tail = self._head.next
            while tail is not None and tail.x < width:
                tail = tail.next
            while tail is not None:
                xpos = tail.x - width
                assert node is not None
                while node.next is not None and node.next.x <= xpos:
                    prev = node
                    node = node.next
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if y < best_y or waste < best_waste or (waste == best_waste and xpos < best_x):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = prev
                tail = tail.next

        return best, best_x, best_y

    def _pack_one(self, width: int, height: int) -> Optional[Tuple[int, int]]:
        prev, rx, ry = self._find_best_pos(width, height)
        if prev is None or ry + height > self.height or self._free_head is None:
            return None

        node = self._free_head
        self._free_head = node.next
        node.x = rx
        node.y = ry + height

        cur = prev.next
        assert cur is not None
        if cur.x < rx:
            following = cur.next
            cur.next = node
            cur = following
        else:
            prev.next = node

        assert cur is not None
        while cur.next is not None and cur.next.x <= rx + width:
            following = cur.next
            cur.next = self._free_head
            self._free_head = cur
            cur = following

        node.next = cur
        if cur.x < rx + width:
            cur.x = rx + width

        return rx, ry

    def pack(self, rects: Iterable[PackRect]) -> bool:
        """Place ``rects`` in place; returns True if every one was packed.

        Tallest rectangles are placed first. Empty rectangles need no space and
        land at (0, 0); ones that do not fit get ``MAXVAL`` coordinates.
        """
        items: List[PackRect] = list(rects)
        for rect in sorted(items, key=lambda r: (-r.h, -r.w)):
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            placed = self._pack_one(rect.w, rect.h)
            if placed is None:
                rect.x = rect.y = MAXVAL
            else:
                rect.x, rect.y = placed

        all_packed = True
        for rect in items:
            rect.was_packed = not (rect.x == MAXVAL and rect.y == MAXVAL)
            all_packed = all_packed and rect.was_packed
        return all_packed