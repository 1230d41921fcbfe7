"""Constants for poker hand evaluation."""

# Every evaluated hand holds exactly this many cards
HAND_SIZE = 5

# Highest low value allowed in a qualifying eight-or-better low
LOW_QUALIFIER = 8

# Rank tallies are indexed by high value (2..14); slots 0 and 1 stay empty
RANK_COUNT_SLOTS = 15

# Royal flush and wheel rank sets, as sorted high values
ROYAL_VALUES = (10, 11, 12, 13, 14)
WHEEL_VALUES = (2, 3, 4, 5, 14)

# Comparison value of the wheel's high card (the five, never the ace)
WHEEL_HIGH_VALUE = 5

# Count shapes: rank multiplicities sorted descending
SHAPE_FOUR_OF_A_KIND = (4, 1)
SHAPE_FULL_HOUSE = (3, 2)
SHAPE_THREE_OF_A_KIND = (3, 1, 1)
SHAPE_TWO_PAIR = (2, 2, 1)
SHAPE_ONE_PAIR = (2, 1, 1, 1)

