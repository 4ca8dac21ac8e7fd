"""Materials kept in a height-balanced search tree ordered by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Material


def format_material_code(prefix: str, number: int) -> str:
    """Build a material code such as ``vt-0000001``."""
    return f"{prefix}-{number:07d}"


class _Node:
    __slots__ = ("material", "left", "right", "height")

    def __init__(self, material: Material) -> None:
        self.material = material
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _Node) -> _Node:
    new_root = root.left
    root.left = new_root.right
    new_root.right = root
    _update(root)
    _update(new_root)
    return new_root


def _rotate_left(root: _Node) -> _Node:
    new_root = root.right
    root.right = new_root.left
    new_root.left = root
    _update(root)
    _update(new_root)
    return new_root


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class MaterialTree:
    """AVL tree of materials keyed by material name; duplicate names are ignored."""

    def __init__(self, materials: Iterable[Material] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for material in materials:
            self.insert(material)

    def insert(self, material: Material) -> bool:
        """Add *material*; return False if its name is already present."""
        self._root, inserted = self._insert(self._root, material)
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: _Node | None, material: Material) -> tuple[_Node, bool]:
        if node is None:
            return _Node(material), True
        if material.name < node.material.name:
            node.left, inserted = self._insert(node.left, material)
        elif material.name > node.material.name:
            node.right, inserted = self._insert(node.right, material)
        else:
            return node, False
        return _rebalance(node), inserted

    def remove(self, name: str) -> None:
        """Remove the material called *name*; raise KeyError if there is none."""
        self._root = self._remove(self._root, name)
        self._size -= 1

    def _remove(self, node: _Node | None, name: str) -> _Node | None:
        if node is None:
            raise KeyError(name)
        if name < node.material.name:
            node.left = self._remove(node.left, name)
        elif name > node.material.name:
            node.right = self._remove(node.right, name)
        else:
            if node.right is None:
                return node.left
            if node.left is None:
                return node.right
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.material = successor.material
            node.right = self._remove_min(node.right)
        return _rebalance(node)

    def _remove_min(self, node: _Node) -> _Node | None:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return _rebalance(node)

    def find_by_name(self, name: str) -> Material | None:
        """Return the material called *name*, or None."""
        node = self._root
        while node is not None and node.material.name != name:
            node = node.left if node.material.name > name else node.right
        return node.material if node is not None else None

    def find_by_code(self, code: str) -> Material | None:
        """Return the first material in pre-order with *code*, or None."""
        return next((m for m in self.preorder() if m.code == code), None)

    def contains_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def contains_code(self, code: str) -> bool:
        return self.find_by_code(code) is not None

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def preorder(self) -> Iterator[Material]:
        def walk(node: _Node | None) -> Iterator[Material]:
            if node is not None:
                yield node.material
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self._root)

    def inorder(self) -> Iterator[Material]:
        def walk(node: _Node | None) -> Iterator[Material]:
            if node is not None:
                yield from walk(node.left)
                yield node.material
                yield from walk(node.right)

        return walk(self._root)

    def postorder(self) -> Iterator[Material]:
        def walk(node: _Node | None) -> Iterator[Material]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.material

        return walk(self._root)

    def format_listing(self) -> str:
        """One line per material, in name order."""
        return "\n".join(
            f"Ma VT: {m.code}, Ten vat tu: {m.name}, Don vi tinh: {m.unit}, "
            f"So luong ton: {m.stock}"
            for m in self.inorder()
        )

    def __iter__(self) -> Iterator[Material]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size