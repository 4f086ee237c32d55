"""Single-variable polynomials kept as ordered lists of terms."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Term:
    """One term ``coeff * x^exp``."""

    coeff: float
    exp: int

    def __str__(self) -> str:
        return f"{self.coeff:.2f}x^{self.exp}"


TermLike = Union[Term, Tuple[float, int]]


def _as_term(item: TermLike) -> Term:
    if isinstance(item, Term):
        return item
    coeff, exp = item
    return Term(float(coeff), int(exp))


class Polynomial:
    """A polynomial in x whose terms are stored in the order given.

    Addition assumes both operands list their terms in decreasing order
    of exponent; multiplication accepts any order and yields a result in
    decreasing order with like terms merged.
    """

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        self._terms: List[Term] = [_as_term(t) for t in terms]

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        left, right = deque(self._terms), deque(other._terms)
        merged: List[Term] = []
        while left and right:
            a, b = left[0], right[0]
            if a.exp > b.exp:
                merged.append(left.popleft())
            elif b.exp > a.exp:
                merged.append(right.popleft())
            else:
                left.popleft()
                right.popleft()
                merged.append(Term(a.coeff + b.coeff, a.exp))
        merged.extend(left)
        merged.extend(right)
        return Polynomial(merged)

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        product = Polynomial()
        for a in self._terms:
            for b in other._terms:
                product.insert_ordered(a.coeff * b.coeff, a.exp + b.exp)
        product.merge_like_terms()
        return product

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"({t.coeff!r}, {t.exp!r})" for t in self._terms)
        return f"Polynomial([{inner}])"

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        return " + ".join(str(t) for t in self._terms)

    def insert_ordered(self, coeff: float, exp: int) -> None:
        """Insert a term before the first term whose exponent is not greater."""
        position = next(
            (k for k, term in enumerate(self._terms) if term.exp <= exp),
            len(self._terms),
        )
        self._terms.insert(position, Term(float(coeff), int(exp)))

    def merge_like_terms(self) -> None:
        """Combine neighbouring terms that share an exponent."""
        merged: List[Term] = []
        for term in self._terms:
            if merged and merged[-1].exp == term.exp:
                merged[-1] = Term(merged[-1].coeff + term.coeff, term.exp)
            else:
                merged.append(term)
        self._terms = merged


def parse_terms(text: str) -> List[Term]:
    """Parse whitespace-separated ``coeff exp`` pairs."""
    fields = text.split()
    if len(fields) % 2:
        raise ValueError("terms must be given as coefficient/exponent pairs")
    pairs = zip(fields[0::2], fields[1::2])
    try:
        return [Term(float(coeff), int(exp)) for coeff, exp in pairs]
    except ValueError as exc:
        raise ValueError(f"malformed term list: {text!r}") from exc


def _describe(poly: Polynomial) -> str:
    return str(poly) if len(poly) else "No elements in the polynomial"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Add and multiply two polynomials in x."
    )
    parser.add_argument(
        "first", help='terms as "coeff exp ..." in decreasing order of exponent'
    )
    parser.add_argument(
        "second", help='terms as "coeff exp ..." in decreasing order of exponent'
    )
    args = parser.parse_args(argv)
    try:
        p = Polynomial(parse_terms(args.first))
        q = Polynomial(parse_terms(args.second))
    except ValueError as exc:
        parser.error(str(exc))
    print("1st polynomial:")
    print(_describe(p))
    print("2nd polynomial:")
    print(_describe(q))
    print("Sum:")
    print(_describe(p + q))
    print("Product:")
    print(_describe(p * q))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())