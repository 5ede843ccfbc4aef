from services.booking.domain.enum import DiscountRule
from services.shared.domain import Money


def determine_discount(
    booking_count: int, capacity: int, minimum_passengers: int
) -> DiscountRule:
    """追加後の予約数から割引ルールを決定する

    判定順序は固定（満席判定が先）:
    1. 予約数 == 定員                 -> LAST_SEAT（割引なし）
    2. 予約数 == 最少催行人数 - 1     -> ONE_AWAY_FROM_MINIMUM_PASSENGERS（30%）
    3. それ以外                       -> STANDARD（10%）
    """
    if booking_count == capacity:
        return DiscountRule.LAST_SEAT
    if booking_count == minimum_passengers - 1:
        return DiscountRule.ONE_AWAY_FROM_MINIMUM_PASSENGERS
    return DiscountRule.STANDARD


def compute_final_price(base_price: Money, rule: DiscountRule) -> Money:
    """基本料金に割引を適用した最終価格"""
    return base_price.discounted(rule.rate)
