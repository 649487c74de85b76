#!/usr/bin/env python3
"""
Purpose:
    Loads product definitions from YAML. Resource definitions may live in
    separate files pulled in with `!include` / `!includeglob`.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from resgen.core.constants import DEFAULT_TEXT_ENCODING
from resgen.core.schema.resource import Product


class IncludeResolver:
    def __init__(self, roots: Iterable[Path]):
        self.roots = [Path(r).resolve() for r in roots]

    def _guard(self, p: Path) -> Path:
        rp = p.resolve()
        if not any(rp.is_relative_to(root) for root in self.roots):
            raise ValueError(f"Include path '{p}' is outside allowed roots")
        return rp

    def read_yaml(self, path: Path) -> Any:
        with open(self._guard(path), "r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return yaml.load(f, Loader=make_loader(self))

    def read_many(self, pattern: Path) -> List[Any]:
        matched = sorted(pattern.parent.glob(pattern.name))
        return [self.read_yaml(p) for p in matched]


def make_loader(resolver: IncludeResolver):
    class Loader(yaml.SafeLoader):
        pass

    def _dir(loader: Loader) -> Path:
        # file being processed; SafeLoader exposes .name when reading from file
        if hasattr(loader.stream, "name"):
            return Path(loader.stream.name).parent
        return Path(".")

    def _construct_include(loader: Loader, node: yaml.Node):
        target = Path(loader.construct_scalar(node))
        return resolver.read_yaml(_dir(loader) / target)

    def _construct_includeglob(loader: Loader, node: yaml.Node):
        pattern = Path(loader.construct_scalar(node))
        return resolver.read_many(_dir(loader) / pattern)

    Loader.add_constructor("!include", _construct_include)
    Loader.add_constructor("!includeglob", _construct_includeglob)
    return Loader


def load_yaml_with_includes(path: Path, allowed_roots: Iterable[Path] = ()) -> Dict[str, Any]:
    path = Path(path)
    resolver = IncludeResolver([path.parent, *allowed_roots])
    with open(path, "r", encoding=DEFAULT_TEXT_ENCODING) as f:
        return yaml.load(f, Loader=make_loader(resolver)) or {}


def load_product(path: Path, allowed_roots: Iterable[Path] = ()) -> Product:
    """
    Parse a product YAML file into a `Product`.

    `!includeglob` entries under `objects` may expand to lists; they are
    spliced into the resource list.
    """
    data = load_yaml_with_includes(path, allowed_roots)
    objects: List[Any] = []
    for entry in data.get("objects", []) or []:
        if isinstance(entry, list):
            objects.extend(entry)
        else:
            objects.append(entry)
    data["objects"] = objects
    return Product.model_validate(data)
