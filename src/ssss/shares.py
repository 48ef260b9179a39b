# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Text form of a share: ``[prefix-]index-hexvalue``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .errors import InvalidShare, ValidationError
from .field import FieldContext, field_size_valid

_INDEX = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class Share:
    index: int
    value: str
    prefix: Optional[str] = None
    width: int = field(default=1, compare=False)

    @property
    def degree(self) -> int:
        """Field size implied by the length of the hex value."""
        return 4 * len(self.value)

    def element(self) -> int:
        if not _HEX.fullmatch(self.value):
            raise InvalidShare("invalid share")
        return int(self.value, 16)

    def format(self, width: Optional[int] = None) -> str:
        """Render the share, zero-padding the index to ``width`` digits."""
        if width is None:
            width = self.width
        head = f"{self.prefix}-" if self.prefix else ""
        return f"{head}{self.index:0{width}d}-{self.value}"

    def __str__(self) -> str:
        return self.format()


def index_width(largest: int) -> int:
    """Decimal digits needed to print every index up to ``largest``."""
    return max(1, len(str(largest)))


def format_share(ctx: FieldContext, prefix: Optional[str], index: int, element: int, width: int) -> str:
    return Share(index=index, value=ctx.export_hex(element), prefix=prefix).format(width)


def parse_share(text: str) -> Share:
    """Split a share string into prefix, index and hex value.

    The last two ``-`` separated parts are the index and the value; anything
    before them is the prefix (which may itself contain dashes).
    """
    parts = text.split("-")
    if len(parts) < 2:
        raise InvalidShare("invalid share")
    index, value = parts[-2], parts[-1]
    if not _INDEX.fullmatch(index):
        raise InvalidShare("invalid share")
    prefix = "-".join(parts[:-2]) or None
    return Share(index=int(index), value=value, prefix=prefix, width=len(index))


def parse_shares(texts: Iterable[str], threshold: int) -> List[Share]:
    """Parse the first ``threshold`` shares and check they share one field size.

    Shares beyond ``threshold`` are ignored.
    """
    if threshold < 1:
        raise ValidationError("threshold must be at least 1")
    shares: List[Share] = []
    for text in texts:
        if len(shares) == threshold:
            break
        shares.append(parse_share(text))
    if len(shares) < threshold:
        raise ValidationError(f"{threshold} shares required, got {len(shares)}")

    degree = shares[0].degree
    if not field_size_valid(degree):
        raise ValidationError("Share has illegal length.")
    if any(share.degree != degree for share in shares):
        raise ValidationError("Shares have different security levels.")
    return shares


__all__ = ["Share", "index_width", "format_share", "parse_share", "parse_shares"]
