"""アプリケーションサービスの処理結果

業務上想定される結果は例外ではなく、以下のいずれかの値として返す。

- Success: 成功（ペイロードを保持）
- ValidationFailed: 入力値が不正
- NotFound: 参照先が存在しない
- Conflict: 入力は正しいが、現在の状態では実行できない
- UnexpectedFailure: データ整合性の破綻など想定外の失敗
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """成功"""

    value: T


@dataclass(frozen=True)
class ValidationFailed:
    """入力値の検証エラー"""

    error: str


@dataclass(frozen=True)
class NotFound:
    """参照先のリソースが存在しない"""

    error: str = "resource not found"


@dataclass(frozen=True)
class Conflict:
    """状態・定員のルールにより実行できない"""

    error: str


@dataclass(frozen=True)
class UnexpectedFailure:
    """想定外の失敗"""

    error: str


Failure = Union[ValidationFailed, NotFound, Conflict, UnexpectedFailure]
Result = Union[Success[T], ValidationFailed, NotFound, Conflict, UnexpectedFailure]
