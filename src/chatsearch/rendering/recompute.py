"""Skipping re-renders whose inputs did not change."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

InputsT = TypeVar("InputsT")
OutputT = TypeVar("OutputT")


class RecomputePolicy(Protocol[InputsT]):
    """Decides whether a render must run again for new inputs."""

    def should_recompute(self, prev_inputs: InputsT | None, next_inputs: InputsT) -> bool: ...


class InputsChanged(Generic[InputsT]):
    """Recompute on the first render and whenever the inputs compare unequal."""

    def should_recompute(self, prev_inputs: InputsT | None, next_inputs: InputsT) -> bool:
        return prev_inputs is None or prev_inputs != next_inputs


class RenderHost(Generic[InputsT, OutputT]):
    """Calls a pure render function only when the policy asks for it.

    The host keeps the last inputs and output; the render function itself
    holds no state.
    """

    def __init__(
        self,
        render: Callable[[InputsT], OutputT],
        policy: RecomputePolicy[InputsT] | None = None,
    ) -> None:
        self._render = render
        self._policy: RecomputePolicy[InputsT] = policy or InputsChanged()
        self._inputs: InputsT | None = None
        self._output: OutputT | None = None
        self.render_count = 0

    @property
    def output(self) -> OutputT | None:
        return self._output

    def update(self, inputs: InputsT) -> bool:
        """Feed new inputs; returns True when the render function ran."""
        if not self._policy.should_recompute(self._inputs, inputs):
            return False
        self._output = self._render(inputs)
        self._inputs = inputs
        self.render_count += 1
        return True
