from .discount_rule import DiscountRule as DiscountRule
