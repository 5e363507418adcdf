"""Style Domain Aggregate Root.

The StyleSheet owns every parsed StyleRule of a document and answers the
single question the resolvers ask: which declared value of a property
wins for an element (or one of its pseudo-elements)?
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import soupsieve
from bs4 import Tag

from .parser import (
    iter_rule_blocks,
    parse_declarations,
    selector_specificity,
    split_pseudo_element,
    split_top_level,
    strip_comments,
)
from .value_objects import Declaration, PseudoElement, StyleRule

logger = logging.getLogger(__name__)

# (important, inline, specificity, rule order, declaration index)
_CascadeKey = Tuple[bool, bool, Tuple[int, int, int], int, int]


@dataclass
class StyleSheet:
    """All author rules of one document, in source order.

    Invariants:
        - ``order`` increases strictly with source position across sheets
        - Selectors soupsieve cannot compile never match
    """
    rules: List[StyleRule] = field(default_factory=list)
    _compiled: Dict[str, Optional[soupsieve.SoupSieve]] = field(
        default_factory=dict, repr=False
    )

    @classmethod
    def parse(cls, sources: Iterable[str]) -> "StyleSheet":
        """Build a StyleSheet from the text of ``<style>`` elements."""
        sheet = cls()
        order = 0
        for text in sources:
            for prelude, body in iter_rule_blocks(strip_comments(text)):
                declarations = parse_declarations(body)
                if not declarations:
                    continue
                for selector in split_top_level(prelude, ","):
                    base, pseudo = split_pseudo_element(selector)
                    sheet.rules.append(
                        StyleRule(
                            selector=base,
                            pseudo=pseudo,
                            declarations=declarations,
                            specificity=selector_specificity(selector),
                            order=order,
                        )
                    )
                    order += 1
        logger.debug("Parsed %d style rules", len(sheet.rules))
        return sheet

    def _compile(self, selector: str) -> Optional[soupsieve.SoupSieve]:
        if selector in self._compiled:
            return self._compiled[selector]
        try:
            compiled: Optional[soupsieve.SoupSieve] = soupsieve.compile(selector)
        except (soupsieve.SelectorSyntaxError, NotImplementedError) as exc:
            logger.debug("Ignoring unsupported selector %r: %s", selector, exc)
            compiled = None
        self._compiled[selector] = compiled
        return compiled

    def matches(self, rule: StyleRule, tag: Tag) -> bool:
        compiled = self._compile(rule.selector)
        return compiled is not None and bool(compiled.match(tag))

    def cascaded_value(
        self,
        tag: Tag,
        prop: str,
        pseudo: Optional[PseudoElement] = None,
        inline: Sequence[Declaration] = (),
    ) -> Optional[str]:
        """Return the winning declared value of ``prop``, or None.

        ``!important`` beats normal declarations, inline ``style`` beats
        the sheet, then specificity and source order decide.
        """
        best_key: Optional[_CascadeKey] = None
        best_value: Optional[str] = None
        for rule in self.rules:
            if rule.pseudo != pseudo:
                continue
            for index, declaration in enumerate(rule.declarations):
                if declaration.prop != prop:
                    continue
                if not self.matches(rule, tag):
                    break
                key = (declaration.important, False, rule.specificity, rule.order, index)
                if best_key is None or key > best_key:
                    best_key, best_value = key, declaration.value
        for index, declaration in enumerate(inline):
            if declaration.prop != prop:
                continue
            key = (declaration.important, True, (0, 0, 0), 0, index)
            if best_key is None or key > best_key:
                best_key, best_value = key, declaration.value
        return best_value
