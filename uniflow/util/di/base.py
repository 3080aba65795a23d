"""Provider base and the names of the swappable UniFlow components.

The Firebase, SendGrid and persistence providers each have a real and a
mock variant; every other provider is concrete.
"""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["firebase", "sendgrid", "persistence"]


class ProviderBase(Provider):
    """Base for UniFlow providers.

    Attributes:
        __mock_component__: Which of firebase, sendgrid or persistence the
            provider backs; None for providers with no mock variant
        __is_mock__: True on the in-process variant used by tests
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
