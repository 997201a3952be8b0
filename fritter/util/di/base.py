"""Provider base class and mockable component names."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every Fritter provider.

    A provider that names a ``__mock_component__`` is an abstract component;
    its subclasses are the production and in-memory implementations, told
    apart by ``__is_mock__``. A provider without subclasses is used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mocked: bool) -> type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        implementations = cls.__subclasses__()
        if not implementations:
            return cls

        for impl in implementations:
            if impl.__is_mock__ == mocked:
                return impl

        kind = "in-memory" if mocked else "production"
        raise ValueError(f"No {kind} implementation for {cls.__mock_component__}")
