"""
ClassIdentifier

Key type for blueprints, cached instances and cycle tracking
"""

from dataclasses import dataclass

DEFAULT_TAG = "default"
TAG_SEPARATOR = "#"


@dataclass(frozen=True)
class ClassIdentifier:
    """A type name qualified with an instance tag.

    ``app.Mailer`` and ``app.Mailer#remote`` are wholly independent
    blueprints sharing the same class. The tag never changes which
    class gets instantiated.
    """
    type_name: str
    tag: str = DEFAULT_TAG

    @classmethod
    def parse(cls, reference: str) -> 'ClassIdentifier':
        """Split ``Name`` or ``Name#tag`` into an identifier.

        Example::

            >>> ClassIdentifier.parse("app.Mailer#remote")
            ClassIdentifier(type_name='app.Mailer', tag='remote')
        """
        type_name, separator, tag = reference.partition(TAG_SEPARATOR)
        type_name = type_name.strip()
        if not separator or not tag.strip():
            tag = DEFAULT_TAG
        return cls(type_name, tag.strip())

    def __str__(self) -> str:
        return f"{self.type_name}{TAG_SEPARATOR}{self.tag}"
