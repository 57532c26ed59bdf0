"""Static checks for definitions.

Constraints can only see answers given earlier in the run, so every
constraint should reference an item that appears before it. These checks
find definitions that would misbehave before anyone is prompted.
"""

from collections.abc import Sequence

from ..models import DefinitionIssue, DefinitionReport, Item


def check_definition(definition: Sequence[Item]) -> DefinitionReport:
    """Check a definition for referential problems.

    Reports:
    - duplicate item ids (warning; constraints resolve to the first)
    - constraints on unknown ids (error; never satisfied)
    - constraints on the item itself or a later item (error; the referenced
      answer is always empty when evaluated)
    - constraints with no allowed answers (warning; never satisfied)

    Args:
        definition: Items in definition order

    Returns:
        Report listing every issue in definition order
    """
    report = DefinitionReport(item_count=len(definition))
    first_position: dict[str, int] = {}

    for position, item in enumerate(definition):
        if item.id in first_position:
            report.issues.append(
                DefinitionIssue(
                    severity="warning",
                    item_id=item.id,
                    position=position,
                    hint=f"Duplicate id (first defined at position {first_position[item.id]})",
                )
            )
        else:
            first_position[item.id] = position

    for position, item in enumerate(definition):
        for constraint in item.constraints:
            target = first_position.get(constraint.id)
            if target is None:
                hint = f"Constraint references unknown id '{constraint.id}'"
                severity = "error"
            elif target >= position:
                hint = f"Constraint references '{constraint.id}', which is not asked before it"
                severity = "error"
            elif not constraint.answers:
                hint = f"Constraint on '{constraint.id}' allows no answers"
                severity = "warning"
            else:
                continue
            report.issues.append(
                DefinitionIssue(severity=severity, item_id=item.id, position=position, hint=hint)
            )

    return report
