from .result import Conflict as Conflict
from .result import Failure as Failure
from .result import NotFound as NotFound
from .result import Result as Result
from .result import Success as Success
from .result import UnexpectedFailure as UnexpectedFailure
from .result import ValidationFailed as ValidationFailed
