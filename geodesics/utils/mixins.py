"""Utility mixin classes"""

__all__ = ['ImmutableMixin']


class ImmutableMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for value objects which may not be modified once constructed.

    Subclasses assign their attributes as usual within __init__ and then call
    self._freeze(); any later assignment or deletion raises AttributeError.
    """

    _frozen: bool = False

    def _freeze(self) -> None:
        """Disallows any further attribute assignment"""
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError(
                f'{self.__class__.__name__} is immutable; cannot set attribute {name!r}'
            )

        super().__setattr__(name, value)

    def __delattr__(self, name):
        if self._frozen:
            raise AttributeError(
                f'{self.__class__.__name__} is immutable; cannot delete attribute {name!r}'
            )

        super().__delattr__(name)
