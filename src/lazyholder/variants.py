from __future__ import annotations

"""
The five singleton variants, each a ``Holder`` of a labelled ``Variant``.
"""

import typing as t

from typer import echo

from lazyholder.holder import Holder, InitStrategy


class Variant:
    """A payload that only knows its own label."""

    def __init__(self, label: str) -> None:
        self.label = label

    def display(self) -> str:
        echo(self.label)
        return self.label

    def __repr__(self) -> str:
        return f'<Variant {self.label}>'


# Display order of the demo
VARIANT_LABELS: t.Dict[str, InitStrategy] = {
    'SingletonEager': InitStrategy.eager,
    'SingletonLazy': InitStrategy.lazy,
    'SingletonEagerThreadSafe': InitStrategy.eager_locked,
    'SingletonLazyThreadSafe': InitStrategy.lazy_locked,
    'SingletonBestPractise': InitStrategy.double_checked,
}


def build_variants() -> t.Dict[str, Holder[Variant]]:
    """
    Returns one holder per label, keyed by label
    """
    return {
        label: Holder(Variant, strategy = strategy, name = label, args = [label])
        for label, strategy in VARIANT_LABELS.items()
    }


def run_demo(variants: t.Optional[t.Dict[str, Holder[Variant]]] = None) -> t.List[str]:
    """
    Acquires each variant in order and displays it

    >>> run_demo()
    SingletonEager
    SingletonLazy
    ...
    """
    variants = variants if variants is not None else build_variants()
    return [holder.acquire().display() for holder in variants.values()]


__all__ = ["Variant", "VARIANT_LABELS", "build_variants", "run_demo"]
