from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    symbol: str
    display_name: str
    short_description: str
    message_template: str
    pylint_code: str
    rule_id: str
