from .discount_policy import compute_final_price as compute_final_price
from .discount_policy import determine_discount as determine_discount
