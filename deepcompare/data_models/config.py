# deepcompare/data_models/config.py
# ComparisonConfig data class: the two side labels used in discrepancy
# records and messages.

from dataclasses import dataclass

from deepcompare.utils.constants import DEFAULT_NAME_A, DEFAULT_NAME_B


@dataclass(frozen=True)
class ComparisonConfig:
    """
    Display labels for the left and right sides of a comparison.

    Supplied once per top-level call and passed unchanged through every
    recursive call. Labels are not validated: empty or identical labels are
    accepted, and identical labels collide in Discrepancy.to_dict().

    Fields:
      name_a -- label of the first (left) value.
      name_b -- label of the second (right) value.
    """
    name_a: str = DEFAULT_NAME_A
    name_b: str = DEFAULT_NAME_B


DEFAULT_CONFIG: ComparisonConfig = ComparisonConfig()
