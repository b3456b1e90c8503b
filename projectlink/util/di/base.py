"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all providers.

    A provider class with subclasses is a swappable component: the
    subclasses are its implementations, told apart by ``__is_mock__``.
    A provider class without subclasses is used as-is.

    Attributes:
        __mock_component__: Name of the swappable component, if any
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the implementation of this provider to instantiate.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        implementations = cls.__subclasses__()
        if not implementations:
            return cls

        for impl in implementations:
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
