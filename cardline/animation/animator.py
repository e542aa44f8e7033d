# animation/animator.py

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

# called once per step with the step index; returns False when finished
AnimationAction = Callable[[int], bool]


@dataclass(frozen=True)
class Animation:
    """
    One steppable unit of visual change.

    The action is invoked once per tick with the number of times it has
    already run. When it returns False the animation is over and its
    successor, if any, takes over its slot.
    """
    action: AnimationAction
    step: int = 0
    next: Optional["Animation"] = None

    def advanced(self) -> "Animation":
        """Return this animation one step further along."""
        return replace(self, step=self.step + 1)

    def then(self, successor: "Animation") -> "Animation":
        """Return a copy of this chain with successor run after its last link."""
        if self.next is None:
            return replace(self, next=successor)
        return replace(self, next=self.next.then(successor))

    def chain_length(self) -> int:
        return 1 + (self.next.chain_length() if self.next else 0)


class Animator:
    """Stores and applies a set of running animations."""

    def __init__(self, logger=None):
        self._slots: Dict[int, Animation] = {}
        self._next_id = 0
        self._logger = logger

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, slot_id: int) -> bool:
        return slot_id in self._slots

    @property
    def slots(self) -> Mapping[int, Animation]:
        """Read-only view of the live slots."""
        return MappingProxyType(self._slots)

    def animate(self, animation: Animation) -> int:
        """Add an animation, starting at step 0, and return its slot id."""
        slot_id = self._next_id
        self._next_id += 1
        self._slots[slot_id] = replace(animation, step=0)
        if self._logger:
            self._logger.debug(
                f"Animation {slot_id} registered ({animation.chain_length()} linked)"
            )
        return slot_id

    def step(self) -> bool:
        """Apply one step of every running animation; return whether any ran."""
        if not self._slots:
            return False
        # snapshot: animations added by actions first run on the next step
        for slot_id, animation in list(self._slots.items()):
            if animation.action(animation.step):
                self._slots[slot_id] = animation.advanced()
            elif animation.next is not None:
                self._slots[slot_id] = replace(animation.next, step=0)
            else:
                del self._slots[slot_id]
                if self._logger:
                    self._logger.debug(f"Animation {slot_id} finished")
        return True
