from .rocket_range import RocketRange as RocketRange
