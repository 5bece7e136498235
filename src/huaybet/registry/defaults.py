from huaybet.types import BetType

# id -> (label, digit_count, multiplier, min_stake, max_stake)
DEFAULT_BET_TYPES = {
  BetType.TENG_BON_4: ("4ตัวบน", 4, "5000", "1", "1000"),
  BetType.TODE_4: ("4ตัวโต๊ด", 4, "200", "1", "1000"),
  BetType.TENG_BON_3: ("3ตัวบน", 3, "500", "1", "1000"),
  BetType.TODE_3: ("3ตัวโต๊ด", 3, "120", "1", "1000"),
  BetType.TENG_LANG_3: ("3ตัวหน้า", 3, "500", "1", "1000"),
  BetType.TENG_BON_2: ("2ตัวบน", 2, "90", "1", "1000"),
  BetType.TENG_LANG_2: ("2ตัวล่าง", 2, "90", "1", "1000"),
  BetType.TENG_BON_1: ("วิ่งบน", 1, "3.2", "1", "500"),
  BetType.TENG_LANG_1: ("วิ่งล่าง", 1, "4.2", "1", "500"),
}

# every bet type may currently be combined with every other one
DEFAULT_CONFLICTS: dict[BetType, frozenset[BetType]] = {}
