"""Polynomials in x and y kept as ordered lists of terms."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class BivariateTerm:
    """One term ``coeff * x^xexp * y^yexp``."""

    coeff: float
    xexp: int
    yexp: int

    @property
    def key(self) -> Tuple[int, int]:
        return (self.xexp, self.yexp)

    def __str__(self) -> str:
        return f"{self.coeff:.2f}x^{self.xexp}y^{self.yexp}"


TermLike = Union[BivariateTerm, Tuple[float, int, int]]


def _as_term(item: TermLike) -> BivariateTerm:
    if isinstance(item, BivariateTerm):
        return item
    coeff, xexp, yexp = item
    return BivariateTerm(float(coeff), int(xexp), int(yexp))


def _tail_text(term: BivariateTerm) -> str:
    if term.xexp == 0:
        body = f"{term.coeff:.2f}y^{term.yexp}"
    elif term.yexp == 0:
        body = f"{term.coeff:.2f}x^{term.xexp}"
    else:
        body = str(term)
    return body if term.coeff < 0 else "+" + body


class BivariatePolynomial:
    """A polynomial in x and y, terms ordered by x then y exponent, descending."""

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        self._terms: List[BivariateTerm] = [_as_term(t) for t in terms]

    def __add__(self, other: object) -> "BivariatePolynomial":
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        left, right = deque(self._terms), deque(other._terms)
        merged: List[BivariateTerm] = []
        while left and right:
            a, b = left[0], right[0]
            if a.key > b.key:
                merged.append(left.popleft())
            elif b.key > a.key:
                merged.append(right.popleft())
            else:
                left.popleft()
                right.popleft()
                merged.append(BivariateTerm(a.coeff + b.coeff, a.xexp, a.yexp))
        merged.extend(left)
        merged.extend(right)
        return BivariatePolynomial(merged)

    def __iter__(self) -> Iterator[BivariateTerm]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(
            f"({t.coeff!r}, {t.xexp!r}, {t.yexp!r})" for t in self._terms
        )
        return f"BivariatePolynomial([{inner}])"

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        first, *rest = self._terms
        parts = [str(first)]
        parts.extend(_tail_text(t) for t in rest if t.coeff != 0)
        return " ".join(parts)


def parse_terms(text: str) -> List[BivariateTerm]:
    """Parse whitespace-separated ``coeff xexp yexp`` triples."""
    fields = text.split()
    if len(fields) % 3:
        raise ValueError("terms must be given as coefficient/x/y triples")
    triples = zip(fields[0::3], fields[1::3], fields[2::3])
    try:
        return [BivariateTerm(float(c), int(x), int(y)) for c, x, y in triples]
    except ValueError as exc:
        raise ValueError(f"malformed term list: {text!r}") from exc


def _describe(poly: BivariatePolynomial) -> str:
    return str(poly) if len(poly) else "No terms in polynomial"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Add two polynomials in x and y."
    )
    parser.add_argument(
        "first", help='terms as "coeff xexp yexp ..." in decreasing order'
    )
    parser.add_argument(
        "second", help='terms as "coeff xexp yexp ..." in decreasing order'
    )
    args = parser.parse_args(argv)
    try:
        p = BivariatePolynomial(parse_terms(args.first))
        q = BivariatePolynomial(parse_terms(args.second))
    except ValueError as exc:
        parser.error(str(exc))
    print("1st polynomial:")
    print(_describe(p))
    print("2nd polynomial:")
    print(_describe(q))
    print("The SUM of the 2 polynomials is")
    print(_describe(p + q))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())