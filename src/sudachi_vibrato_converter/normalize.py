"""Normalization of Sudachi POS and inflection vocabularies to the IPADIC set."""

from __future__ import annotations

STAR = "*"

# ---------------------------------------------------------------------------
# Allowed vocabularies
# ---------------------------------------------------------------------------

ALLOWED_CTYPE: frozenset[str] = frozenset({
    "*",
    "ラ変",
    "不変化型",
    "カ変・クル",
    "カ変・来ル",
    "サ変・スル",
    "サ変・−スル",
    "サ変・−ズル",
    "一段",
    "一段・病メル",
    "一段・クレル",
    "一段・得ル",
    "一段・ル",
    "下二・ア行",
    "下二・カ行",
    "下二・ガ行",
    "下二・サ行",
    "下二・ザ行",
    "下二・タ行",
    "下二・ダ行",
    "下二・ナ行",
    "下二・ハ行",
    "下二・バ行",
    "下二・マ行",
    "下二・ヤ行",
    "下二・ラ行",
    "下二・ワ行",
    "下二・得",
    "形容詞・アウオ段",
    "形容詞・イ段",
    "形容詞・イイ",
    "五段・カ行イ音便",
    "五段・カ行促音便",
    "五段・カ行促音便ユク",
    "五段・ガ行",
    "五段・サ行",
    "五段・タ行",
    "五段・ナ行",
    "五段・バ行",
    "五段・マ行",
    "五段・ラ行",
    "五段・ラ行アル",
    "五段・ラ行特殊",
    "五段・ワ行ウ音便",
    "五段・ワ行促音便",
    "四段・カ行",
    "四段・ガ行",
    "四段・サ行",
    "四段・タ行",
    "四段・バ行",
    "四段・マ行",
    "四段・ラ行",
    "四段・ハ行",
    "上二・ダ行",
    "上二・ハ行",
    "特殊・ナイ",
    "特殊・タイ",
    "特殊・タ",
    "特殊・ダ",
    "特殊・デス",
    "特殊・ドス",
    "特殊・ジャ",
    "特殊・マス",
    "特殊・ヌ",
    "特殊・ヤ",
    "文語・ベシ",
    "文語・ゴトシ",
    "文語・ナリ",
    "文語・マジ",
    "文語・シム",
    "文語・キ",
    "文語・ケリ",
    "文語・ル",
    "文語・リ",
})

ALLOWED_CFORM: frozenset[str] = frozenset({
    "*",
    "ガル接続",
    "音便基本形",
    "仮定形",
    "仮定縮約１",
    "仮定縮約２",
    "基本形",
    "基本形-促音便",
    "現代基本形",
    "体言接続",
    "体言接続特殊",
    "体言接続特殊２",
    "文語基本形",
    "未然ウ接続",
    "未然ヌ接続",
    "未然レル接続",
    "未然形",
    "未然特殊",
    "命令ｅ",
    "命令ｉ",
    "命令ｒｏ",
    "命令ｙｏ",
    "連用ゴザイ接続",
    "連用タ接続",
    "連用テ接続",
    "連用デ接続",
    "連用ニ接続",
    "連用形",
})

# ---------------------------------------------------------------------------
# Rewrite tables (applied in order)
# ---------------------------------------------------------------------------

# ASCII hyphen, full-width hyphen, minus sign
CTYPE_SEPARATORS: tuple[str, ...] = ("-", "－", "−")
CTYPE_SEPARATOR = "・"

CTYPE_WHOLE_REWRITES: dict[str, str] = {
    "五段・ワア行": "五段・ワ行ウ音便",
}

CTYPE_SUBSTRING_REWRITES: tuple[tuple[str, str], ...] = (
    ("サ変・スル", "サ変・−スル"),
    ("サ変・ズル", "サ変・−ズル"),
    ("サ変・ｰスル", "サ変・−スル"),
    ("サ変・ｰズル", "サ変・−ズル"),
    ("サ変・ースル", "サ変・−スル"),
    ("サ変・ーズル", "サ変・−ズル"),
    ("サ変・・スル", "サ変・−スル"),
    ("サ変・・ズル", "サ変・−ズル"),
)

# (prefix, replacement); first match wins
CFORM_PREFIX_REWRITES: tuple[tuple[str, str], ...] = (
    ("終止形", "基本形"),
    ("連体形", "基本形"),
    ("連用形", "連用形"),
    ("未然形", "未然形"),
    ("仮定形", "仮定形"),
    ("命令形", "命令ｙｏ"),
)

CFORM_WHOLE_REWRITES: dict[str, str] = {
    "終止連体形": "基本形",
    "意志推量形": "未然ウ接続",
}

# ---------------------------------------------------------------------------
# POS table
# ---------------------------------------------------------------------------

Pos = tuple[str, str, str, str]

POS_OTHER: Pos = ("その他", "*", "*", "*")
POS_NUMERAL: Pos = ("名詞", "数", "*", "*")

_POS_GROUPS: tuple[tuple[tuple[str, ...], Pos], ...] = (
    (("名詞", "代名詞", "形状詞", "接尾辞"), ("名詞", "一般", "*", "*")),
    (("動詞",), ("動詞", "自立", "*", "*")),
    (("形容詞",), ("形容詞", "自立", "*", "*")),
    (("助詞",), ("助詞", "格助詞", "一般", "*")),
    (("助動詞",), ("助動詞", "*", "*", "*")),
    (("副詞",), ("副詞", "一般", "*", "*")),
    (("接続詞",), ("接続詞", "*", "*", "*")),
    (("連体詞",), ("連体詞", "*", "*", "*")),
    (("感動詞",), ("感動詞", "*", "*", "*")),
    (("接頭辞", "接頭詞"), ("接頭詞", "名詞接続", "*", "*")),
    (("記号", "補助記号", "空白"), ("記号", "一般", "*", "*")),
    (("フィラー",), ("フィラー", "*", "*", "*")),
)

POS_TABLE: dict[str, Pos] = {
    label: target for labels, target in _POS_GROUPS for label in labels
}

NUMERAL_POS2 = frozenset({"数詞", "数"})


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def normalize_text_or_star(value: str) -> str:
    """Strip *value*; an empty result becomes ``*``."""
    trimmed = value.strip()
    return trimmed if trimmed else STAR


def strip_spaces(value: str) -> str:
    """Remove every whitespace character, including U+3000."""
    return "".join(c for c in value if not c.isspace() and c != "\u3000")


def normalize_pos(pos0: str, pos1: str | None = None) -> Pos:
    """Map a coarse Sudachi POS label to a 4-level IPADIC POS tuple.

    Unknown labels map to ``その他``.  When *pos1* marks a numeral under
    ``名詞`` the IPADIC ``名詞,数`` class is returned instead of ``名詞,一般``.
    """
    label = pos0.strip()
    if label == "名詞" and pos1 is not None and pos1.strip() in NUMERAL_POS2:
        return POS_NUMERAL
    return POS_TABLE.get(label, POS_OTHER)


def normalize_ctype(value: str) -> tuple[str, bool]:
    """Canonicalize an inflection type.

    Returns ``(canonical, used_fallback)``.  Values outside
    :data:`ALLOWED_CTYPE` become ``*``; ``used_fallback`` is set unless the
    input was already ``*``.
    """
    src = normalize_text_or_star(value)

    canonical = strip_spaces(src)
    for sep in CTYPE_SEPARATORS:
        canonical = canonical.replace(sep, CTYPE_SEPARATOR)

    canonical = CTYPE_WHOLE_REWRITES.get(canonical, canonical)

    for pattern, replacement in CTYPE_SUBSTRING_REWRITES:
        canonical = canonical.replace(pattern, replacement)

    return _restrict(canonical, src, ALLOWED_CTYPE)


def normalize_cform(value: str) -> tuple[str, bool]:
    """Canonicalize an inflection form; same return contract as :func:`normalize_ctype`."""
    src = normalize_text_or_star(value)
    canonical = strip_spaces(src)

    if canonical in CFORM_WHOLE_REWRITES:
        canonical = CFORM_WHOLE_REWRITES[canonical]
    else:
        for prefix, replacement in CFORM_PREFIX_REWRITES:
            if canonical.startswith(prefix):
                canonical = replacement
                break

    return _restrict(canonical, src, ALLOWED_CFORM)


def _restrict(canonical: str, src: str, allowed: frozenset[str]) -> tuple[str, bool]:
    if canonical in allowed:
        return canonical, False
    return STAR, src != STAR
