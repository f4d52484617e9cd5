"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from settings
or from a plain directory path.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from jsonlocale.configuration import LocalizationSettings, settings
from jsonlocale.i18n.translator import Translator
from jsonlocale.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    lang_dir: Union[str, Path, None] = None,
    *,
    config: Optional[LocalizationSettings] = None,
    detected_languages: Optional[Sequence[str]] = None,
    **overrides,
) -> Translator:
    """Create and configure a Translator instance.

    Without arguments the application settings (environment variables and
    ``.env``) are used. A ``lang_dir`` or keyword overrides produce a copy of
    those settings with the given fields replaced.

    Args:
        lang_dir: Directory with translation files (file mode).
        config: Explicit settings; takes precedence over application settings.
        detected_languages: Candidate tags instead of host detection.
        **overrides: LocalizationSettings fields to replace, e.g.
            default_lang="de" or fallback_lang="en".

    Returns:
        Translator: Configured translator instance

    Raises:
        LocalizationConfigError: If the resulting settings have no source.

    Usage:
        # Use environment configuration
        translator = create_translator()

        # Custom translations directory
        translator = create_translator("lang", default_lang="de")
    """
    base = config if config is not None else settings.localization
    if lang_dir is not None:
        overrides["lang_dir"] = Path(lang_dir)
    if overrides:
        base = base.model_copy(update=overrides)

    translator = Translator(base, detected_languages=detected_languages)
    logger.info(
        "translator_created",
        lang_dir=str(base.lang_dir) if base.lang_dir else None,
        use_resources=base.use_resources,
        language=translator.current_language,
    )
    return translator
