"""
Rule annotation layer.

Rule tags are authored alongside each form and validated against the closed
RuleTag set at load time. Nothing here derives or alters a surface form; the
tags only explain which morphological rule produced it.
"""
from typing import Dict, FrozenSet, Iterable, List, Optional

from conjugador.models.enums import RuleKind, RuleTag
from conjugador.models.verb import Form
from conjugador.schemas.conjugation import RuleTagResponse
from conjugador.utils.labels import get_rule_tag_label


def explain(form: Optional[Form]) -> FrozenSet[RuleTag]:
    """Return the rule tags of a form, or an empty set when there is no form."""
    if form is None:
        return frozenset()
    return form.rules


def sort_rules(tags: Iterable[RuleTag]) -> List[RuleTag]:
    """Order tags by declaration order of the RuleTag enum."""
    order = {tag: position for position, tag in enumerate(RuleTag)}
    return sorted(set(tags), key=order.__getitem__)


def group_by_kind(tags: Iterable[RuleTag]) -> Dict[RuleKind, List[RuleTag]]:
    """
    Group rule tags by their kind.

    Args:
        tags: Rule tags to group

    Returns:
        Mapping of RuleKind to the tags of that kind (kinds without tags are omitted)
    """
    grouped: Dict[RuleKind, List[RuleTag]] = {}
    for tag in sort_rules(tags):
        grouped.setdefault(tag.kind, []).append(tag)
    return grouped


def describe_rules(tags: Iterable[RuleTag]) -> List[RuleTagResponse]:
    """Build response items (tag, kind, Spanish label) for a set of tags."""
    return [
        RuleTagResponse(tag=tag, kind=tag.kind, label=get_rule_tag_label(tag))
        for tag in sort_rules(tags)
    ]
