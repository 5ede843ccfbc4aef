from .rocket_repository import RocketRepository as RocketRepository
