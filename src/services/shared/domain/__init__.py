from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .repository import Repository as Repository
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
