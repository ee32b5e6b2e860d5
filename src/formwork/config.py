"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, shared freely
between forms.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Defaults applied when a ``Form`` is created. Immutable after creation.

    Override what you need::

        config = FormConfig(language="en-us")
        form = Form(schema, config=config)
    """

    # Language tag looked up with translate.translator_for()
    language: str = "en-gb"
