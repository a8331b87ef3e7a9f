"""
LexDesk - Lexical Relevance Ranking

Scores case documents against a free-text question using substring and
word overlap only. No embeddings and no external calls: the same inputs
always produce the same ranking.

Two presets are provided:
- basic: content and name substring matches, every token kept
- enhanced: adds repetition, category, partial-word and length bonuses,
  drops tokens of one or two characters
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Iterable, Optional, Union

from lexdesk.core.config import settings
from lexdesk.core.exceptions import ConfigurationError, InvalidArgumentError
from lexdesk.core.logging import LoggerMixin
from lexdesk.core.types import Document, RankingPreset


@dataclass(frozen=True)
class RankingConfig:
    """
    Weights and limits for lexical ranking.

    Defaults describe the basic preset. A zero weight disables its term.
    """
    min_token_length: int = 1
    content_match_weight: float = 1.0
    repeat_bonus: float = 0.0
    max_repeat_bonus_occurrences: int = 0
    name_match_weight: float = 2.0
    category_match_weight: float = 0.0
    partial_match_weight: float = 0.0
    length_bonus_divisor: float = 1000.0
    max_length_bonus: float = 0.0
    min_score_threshold: float = 0.0
    top_n: int = 3

    def __post_init__(self):
        if self.top_n < 0:
            raise InvalidArgumentError("top_n", "must not be negative")
        if self.min_token_length < 1:
            raise InvalidArgumentError("min_token_length", "must be at least 1")
        if self.length_bonus_divisor <= 0:
            raise InvalidArgumentError("length_bonus_divisor", "must be positive")


BASIC_RANKING = RankingConfig()

ENHANCED_RANKING = RankingConfig(
    min_token_length=3,
    content_match_weight=1.0,
    repeat_bonus=0.5,
    max_repeat_bonus_occurrences=3,
    name_match_weight=3.0,
    category_match_weight=2.0,
    partial_match_weight=0.3,
    length_bonus_divisor=1000.0,
    max_length_bonus=2.0,
    min_score_threshold=0.5,
    top_n=5,
)

PRESETS: dict[RankingPreset, RankingConfig] = {
    RankingPreset.BASIC: BASIC_RANKING,
    RankingPreset.ENHANCED: ENHANCED_RANKING,
}


@lru_cache
def load_ranking_overrides() -> dict:
    """Per-preset overrides from configs/ranking.yaml, read once per process."""
    return settings.load_yaml_config("ranking")


def get_ranking_config(
    preset: Optional[Union[RankingPreset, str]] = None,
) -> RankingConfig:
    """
    Resolve a preset name to its RankingConfig.

    Overrides for a preset may be placed under its name in
    configs/ranking.yaml, e.g. ``enhanced: {top_n: 8}``.

    Raises:
        InvalidArgumentError: If the preset name is unknown
        ConfigurationError: If the YAML overrides name an unknown field
    """
    name = preset or settings.RANKING_PRESET
    try:
        preset = RankingPreset(name)
    except ValueError:
        raise InvalidArgumentError("preset", f"unknown ranking preset '{name}'")

    config = PRESETS[preset]
    overrides = load_ranking_overrides().get(preset.value) or {}
    if overrides:
        known = {f.name for f in fields(RankingConfig)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown ranking options for preset '{preset.value}': {sorted(unknown)}"
            )
        config = replace(config, **overrides)
    return config


@dataclass
class ScoredDocument:
    """A document paired with its relevance score."""
    document: Document
    score: float


class LexicalRanker(LoggerMixin):
    """
    Keyword-overlap ranker for case documents.

    Per query token and document:
    - content substring match, plus a capped bonus for repeated occurrences
    - name substring match
    - category label substring match
    - partial matches against individual content words

    A length bonus is added to every document matching at least one
    token, then documents at or below the threshold are dropped and the
    rest are sorted by descending score (ties keep input order) and cut
    to top_n.
    """

    def __init__(self, config: Optional[RankingConfig] = None):
        self.config = config or get_ranking_config()

    def tokenize(self, query: str) -> list[str]:
        """Lowercase, split on whitespace and drop short tokens."""
        if query is None:
            raise InvalidArgumentError("query")
        return [
            token for token in query.lower().split()
            if len(token) >= self.config.min_token_length
        ]

    def score(self, tokens: list[str], document: Document) -> float:
        """Score one document against already tokenized query terms."""
        cfg = self.config
        content = document.content.lower()
        name = document.name.lower()
        category = document.category.value.lower()
        content_words = content.split() if cfg.partial_match_weight else []

        score = 0.0
        for token in tokens:
            if token in content:
                score += cfg.content_match_weight
                if cfg.repeat_bonus:
                    occurrences = content.count(token)
                    extra = min(occurrences - 1, cfg.max_repeat_bonus_occurrences)
                    score += extra * cfg.repeat_bonus

            if token in name:
                score += cfg.name_match_weight

            if cfg.category_match_weight and token in category:
                score += cfg.category_match_weight

            if content_words:
                partial_matches = sum(
                    1 for word in content_words
                    if token in word or word in token
                )
                score += partial_matches * cfg.partial_match_weight

        if score > 0 and cfg.max_length_bonus:
            score += min(len(document.content) / cfg.length_bonus_divisor, cfg.max_length_bonus)

        return score

    def score_documents(
        self,
        query: str,
        documents: Iterable[Document],
    ) -> list[ScoredDocument]:
        """Score every document, in input order, without filtering."""
        if documents is None:
            raise InvalidArgumentError("documents")
        tokens = self.tokenize(query)
        if not tokens:
            return [ScoredDocument(document=doc, score=0.0) for doc in documents]
        return [
            ScoredDocument(document=doc, score=self.score(tokens, doc))
            for doc in documents
        ]

    def rank_scored(
        self,
        query: str,
        documents: Iterable[Document],
    ) -> list[ScoredDocument]:
        """Filter, sort and truncate scored documents."""
        scored = self.score_documents(query, documents)
        relevant = [s for s in scored if s.score > self.config.min_score_threshold]
        relevant.sort(key=lambda s: s.score, reverse=True)
        ranked = relevant[:self.config.top_n]

        self.logger.debug(
            "Ranked documents",
            candidates=len(scored),
            above_threshold=len(relevant),
            returned=len(ranked),
            top_score=round(ranked[0].score, 3) if ranked else None,
        )

        return ranked

    def rank(
        self,
        query: str,
        documents: Iterable[Document],
    ) -> list[Document]:
        """
        Rank documents against a query.

        Args:
            query: Free-text question; empty or whitespace-only yields no results
            documents: Candidate documents

        Returns:
            At most top_n documents, highest score first

        Raises:
            InvalidArgumentError: If query or documents is None
        """
        return [s.document for s in self.rank_scored(query, documents)]


def rank(
    query: str,
    documents: Iterable[Document],
    config: Optional[RankingConfig] = None,
) -> list[Document]:
    """Rank documents with the given config (the configured preset by default)."""
    return LexicalRanker(config).rank(query, documents)
