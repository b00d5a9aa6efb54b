"""Translation models for the i18n registry.

Defines the translation entry with its named variant slots, the closed set
of variant labels, and the per-call options consumed by the translator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal

DEFAULT_FALLBACK_LANGUAGE = "en"

Data = Dict[str, Any]
PluralizationFunc = Callable[[int], str]


class PluralCategory(str, Enum):
    """Plural categories a pluralization function may return."""

    ZERO = "Zero"
    ONE = "One"
    TWO = "Two"
    FEW = "Few"
    MANY = "Many"

    @classmethod
    def from_label(cls, label: Any) -> Optional["PluralCategory"]:
        """Convert a label to a PluralCategory.

        Args:
            label: Label returned by a pluralization function (e.g., "One").

        Returns:
            Matching PluralCategory, or None if the label is not a category.
        """
        try:
            return cls(label)
        except ValueError:
            return None


class Gender(str, Enum):
    """Grammatical genders with dedicated variant slots."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "NonBinary"

    @classmethod
    def parse(cls, value: Any) -> Optional["Gender"]:
        """Normalize a caller-supplied gender string.

        Matching is case-insensitive. Accepted values are "male", "female",
        "nonbinary" and "non-binary".

        Args:
            value: Gender string from the caller.

        Returns:
            Matching Gender, or None if the value is not recognized.
        """
        if not isinstance(value, str):
            return None
        return _GENDER_ALIASES.get(value.lower())


_GENDER_ALIASES = {
    "male": Gender.MALE,
    "female": Gender.FEMALE,
    "nonbinary": Gender.NON_BINARY,
    "non-binary": Gender.NON_BINARY,
}


class Variant(str, Enum):
    """Closed set of variant slots held by a TranslateEntry."""

    DEFAULT = "Default"

    ZERO = "Zero"
    ONE = "One"
    TWO = "Two"
    FEW = "Few"
    MANY = "Many"

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "NonBinary"

    ZERO_MALE = "ZeroMale"
    ONE_MALE = "OneMale"
    TWO_MALE = "TwoMale"
    FEW_MALE = "FewMale"
    MANY_MALE = "ManyMale"

    ZERO_FEMALE = "ZeroFemale"
    ONE_FEMALE = "OneFemale"
    TWO_FEMALE = "TwoFemale"
    FEW_FEMALE = "FewFemale"
    MANY_FEMALE = "ManyFemale"

    ZERO_NON_BINARY = "ZeroNonBinary"
    ONE_NON_BINARY = "OneNonBinary"
    TWO_NON_BINARY = "TwoNonBinary"
    FEW_NON_BINARY = "FewNonBinary"
    MANY_NON_BINARY = "ManyNonBinary"

    @classmethod
    def from_label(cls, label: str) -> Optional["Variant"]:
        """Convert a variant label (e.g., "ManyFemale") to a Variant.

        Returns:
            Matching Variant, or None for unknown labels.
        """
        try:
            return cls(label)
        except ValueError:
            return None

    @classmethod
    def compose(
        cls,
        plural: Optional[PluralCategory] = None,
        gender: Optional[Gender] = None,
    ) -> Optional["Variant"]:
        """Build the variant for a plural category and/or gender.

        Args:
            plural: Plural category, if any.
            gender: Gender category, if any.

        Returns:
            Variant named by concatenating both labels (e.g., One + Male ->
            OneMale), or None when neither is given.
        """
        label = (plural.value if plural else "") + (gender.value if gender else "")
        if not label:
            return None
        return cls.from_label(label)


class TranslationMode(str, Enum):
    """Resolution mode selected from the options present on a call."""

    DEFAULT = "Default"
    PLURALIZED = "Pluralized"
    GENDERED = "Gendered"
    PLURALIZED_GENDERED = "PluralizedGendered"

    @property
    def uses_count(self) -> bool:
        return self in (TranslationMode.PLURALIZED, TranslationMode.PLURALIZED_GENDERED)

    @property
    def uses_gender(self) -> bool:
        return self in (TranslationMode.GENDERED, TranslationMode.PLURALIZED_GENDERED)


class TranslateEntry(BaseModel):
    """One translatable message and its variants.

    Only ``key`` is required to be meaningful; every variant slot defaults to
    the empty string, and an empty slot falls back to the next candidate when
    translating. Field names are PascalCase when loaded or dumped (``Key``,
    ``Default``, ``OneMale``), and are matched case-insensitively, ignoring
    ``_`` and ``-`` separators.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        strict=True,
        extra="ignore",
    )

    key: str = ""
    default: str = ""

    # Pluralization
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""

    # Genders
    male: str = ""
    female: str = ""
    non_binary: str = ""

    # Pluralization with male gender
    zero_male: str = ""
    one_male: str = ""
    two_male: str = ""
    few_male: str = ""
    many_male: str = ""

    # Pluralization with female gender
    zero_female: str = ""
    one_female: str = ""
    two_female: str = ""
    few_female: str = ""
    many_female: str = ""

    # Pluralization with non binary gender
    zero_non_binary: str = ""
    one_non_binary: str = ""
    two_non_binary: str = ""
    few_non_binary: str = ""
    many_non_binary: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_field_names(cls, data: Any) -> Any:
        """Map loosely spelled field names onto the PascalCase aliases.

        A null slot (``One:`` in YAML, ``"One": null`` in JSON) is stored as
        the empty string.
        """
        if not isinstance(data, dict):
            return data
        normalized = {}
        for name, value in data.items():
            if isinstance(name, str):
                name = _FIELD_ALIASES.get(_normalize_name(name), name)
            normalized[name] = "" if value is None else value
        return normalized

    def variant(self, variant: Variant) -> str:
        """Return the text stored in a variant slot."""
        return _VARIANT_ACCESSORS[variant](self)


TranslateEntries = List[TranslateEntry]


def _normalize_name(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


_FIELD_ALIASES = {
    _normalize_name(name): field.alias or name
    for name, field in TranslateEntry.model_fields.items()
}

_VARIANT_ACCESSORS: Dict[Variant, Callable[[TranslateEntry], str]] = {
    Variant.DEFAULT: lambda entry: entry.default,
    Variant.ZERO: lambda entry: entry.zero,
    Variant.ONE: lambda entry: entry.one,
    Variant.TWO: lambda entry: entry.two,
    Variant.FEW: lambda entry: entry.few,
    Variant.MANY: lambda entry: entry.many,
    Variant.MALE: lambda entry: entry.male,
    Variant.FEMALE: lambda entry: entry.female,
    Variant.NON_BINARY: lambda entry: entry.non_binary,
    Variant.ZERO_MALE: lambda entry: entry.zero_male,
    Variant.ONE_MALE: lambda entry: entry.one_male,
    Variant.TWO_MALE: lambda entry: entry.two_male,
    Variant.FEW_MALE: lambda entry: entry.few_male,
    Variant.MANY_MALE: lambda entry: entry.many_male,
    Variant.ZERO_FEMALE: lambda entry: entry.zero_female,
    Variant.ONE_FEMALE: lambda entry: entry.one_female,
    Variant.TWO_FEMALE: lambda entry: entry.two_female,
    Variant.FEW_FEMALE: lambda entry: entry.few_female,
    Variant.MANY_FEMALE: lambda entry: entry.many_female,
    Variant.ZERO_NON_BINARY: lambda entry: entry.zero_non_binary,
    Variant.ONE_NON_BINARY: lambda entry: entry.one_non_binary,
    Variant.TWO_NON_BINARY: lambda entry: entry.two_non_binary,
    Variant.FEW_NON_BINARY: lambda entry: entry.few_non_binary,
    Variant.MANY_NON_BINARY: lambda entry: entry.many_non_binary,
}


@dataclass(frozen=True)
class Options:
    """Per-call options for translate().

    ``None`` means absent. A gender that is present but not recognized is
    handled exactly like an absent one when the variant is selected.

    Attributes:
        count: Count used to pick a plural variant.
        gender: Gender string (male, female, nonbinary, non-binary; case-insensitive).
        data: Interpolation data, passed as-is to the template renderer.
    """

    count: Optional[int] = None
    gender: Optional[str] = None
    data: Optional[Any] = None

    @property
    def mode(self) -> TranslationMode:
        """Resolution mode implied by which options are present."""
        if self.count is not None and self.gender is not None:
            return TranslationMode.PLURALIZED_GENDERED
        if self.count is not None:
            return TranslationMode.PLURALIZED
        if self.gender is not None:
            return TranslationMode.GENDERED
        return TranslationMode.DEFAULT


@dataclass(frozen=True)
class I18nConfig:
    """Configuration for an I18n registry.

    Attributes:
        fallback_language_name: Language used when the requested language or
            key is missing. An empty value means "en".
        disable_consistency_check: Skip key-set comparison in add_language().
    """

    fallback_language_name: str = DEFAULT_FALLBACK_LANGUAGE
    disable_consistency_check: bool = False

    def __post_init__(self):
        if not self.fallback_language_name:
            object.__setattr__(self, "fallback_language_name", DEFAULT_FALLBACK_LANGUAGE)
