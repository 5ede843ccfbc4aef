from .entity import Booking as Booking
from .enum import DiscountRule as DiscountRule
from .repository import BookingRepository as BookingRepository
from .service import compute_final_price as compute_final_price
from .service import determine_discount as determine_discount
