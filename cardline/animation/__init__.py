# animation/__init__.py

from .animator import Animation, AnimationAction, Animator

__all__ = ['Animation', 'AnimationAction', 'Animator']
