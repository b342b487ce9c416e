# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Module for exceptions."""

from __future__ import annotations

from typing import Any, Callable


class FPError(Exception):
    """FPError."""


class FPTypeError(TypeError, FPError):
    """FPTypeError."""


class SignatureError(FPTypeError):
    """The arity of a callable cannot be determined from its signature."""

    def __init__(self, func: Callable, reason: str = "") -> None:
        super().__init__(func, reason)

    def __str__(self) -> str:
        func, reason = self.args
        name = getattr(func, "__qualname__", repr(func))
        msg = f"Cannot determine the arity of `{name}`"
        if reason:
            msg += f": {reason}"
        return f"{msg}; use `curry_n` with an explicit arity instead"


class KeySerializationError(FPTypeError):
    """A memoized function received an argument that cannot be used as a key."""

    def __init__(self, value: Any) -> None:
        super().__init__(value)

    @property
    def value(self) -> Any:
        return self.args[0]

    def __str__(self) -> str:
        typename = type(self.value).__qualname__
        return (
            f"Cannot build a memoization key from a value of type `{typename}`: "
            f"{self.value!r}"
        )
