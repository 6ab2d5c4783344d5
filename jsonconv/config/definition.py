# jsonconv/config/definition.py
"""
Configuration definitions.

A ConfigDef is an ordered set of OptionDescriptors. It is built once by a
schema-building function, frozen, and then shared. Parsing raw input against
it goes through a pydantic model generated from the descriptors, so type
coercion, defaults and validators all run in one validation pass.

Usage:
    from jsonconv.config import ConfigDef, ConfigType, Importance

    definition = (
        ConfigDef("Example")
        .define_boolean("feature.enable", True, Importance.HIGH, "Turn the feature on.")
        .define_int("feature.limit", 10, Importance.LOW, "Upper bound.")
        .freeze()
    )
    values = definition.parse({"feature.limit": "25"})
    values["feature.limit"]  # 25
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    create_model,
)

from jsonconv.config.types import FIELD_TYPES, ConfigType, Importance, Width
from jsonconv.config.validators import ValidString, Validator
from jsonconv.core.config import ConfigDefinitionError, ConfigValidationError
from jsonconv.logging.logger import get_logger
from jsonconv.logging.tags import DEFINITION, VALIDATION

logger = get_logger(__name__)


class _NoDefault:
    """Marker for options that must be supplied."""

    def __repr__(self) -> str:
        return "NO_DEFAULT_VALUE"

    def __copy__(self) -> _NoDefault:
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> _NoDefault:
        return self


NO_DEFAULT_VALUE: Any = _NoDefault()

_IMPORTANCE_RANK = {Importance.HIGH: 0, Importance.MEDIUM: 1, Importance.LOW: 2}


# =============================================================================
# Option Descriptor
# =============================================================================


class OptionDescriptor(BaseModel):
    """Metadata for one configuration key. Immutable once registered."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Dotted configuration key")
    type: ConfigType
    default: Any = Field(default=NO_DEFAULT_VALUE, description="Coerced default value")
    importance: Importance
    documentation: str = ""
    group: Optional[str] = None
    order_in_group: int = -1
    width: Width = Width.NONE
    display_name: str
    validator: Optional[Validator] = Field(default=None, exclude=True)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"OptionDescriptor is immutable; cannot set {name!r}")

    @property
    def required(self) -> bool:
        return self.default is NO_DEFAULT_VALUE

    @property
    def allowed_values(self) -> Optional[List[str]]:
        """Allowed values when the validator restricts the option to a fixed set."""
        if isinstance(self.validator, ValidString):
            return list(self.validator.allowed)
        return None


def _bind(validator: Validator, name: str):
    def check(value: Any) -> Any:
        return validator(name, value)

    return check


def _member(enum_type: Type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ConfigDefinitionError(
            f"Invalid {enum_type.__name__} {value!r} for configuration {name}: "
            f"expected one of {allowed}"
        ) from None


def _annotation_for(
    type_: ConfigType, name: str, validator: Optional[Validator], optional: bool
) -> Any:
    annotation = FIELD_TYPES[type_]
    if validator is not None:
        annotation = Annotated[annotation, AfterValidator(_bind(validator, name))]
    if optional:
        annotation = Optional[annotation]
    return annotation


def _error_message(key: str, error: Dict[str, Any]) -> str:
    if error["type"] == "missing":
        return f'Missing required configuration "{key}" which has no default value.'

    cause = error.get("ctx", {}).get("error")
    message = str(cause) if cause is not None else error["msg"]
    if message.startswith("Invalid value"):
        return message
    return f"Invalid value {error.get('input')!r} for configuration {key}: {message}"


# =============================================================================
# ConfigDef
# =============================================================================


class ConfigDef:
    """
    Ordered, name-keyed collection of option definitions.

    Options are registered with define() (or the typed shortcuts) in
    presentation order. Once freeze() is called, the definition is read-only
    and safe to share between threads.

    Args:
        name: Schema name, used in log output and generated model names
    """

    def __init__(self, name: str = "Config"):
        self.name = name
        self._options: Dict[str, OptionDescriptor] = {}
        self._groups: List[str] = []
        self._model: Optional[Type[BaseModel]] = None
        self._field_keys: Dict[str, str] = {}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Definition
    # -------------------------------------------------------------------------

    def define(
        self,
        name: str,
        type: ConfigType,
        default: Any,
        importance: Importance,
        documentation: str,
        *,
        validator: Optional[Validator] = None,
        group: Optional[str] = None,
        order_in_group: int = -1,
        width: Width = Width.NONE,
        display_name: Optional[str] = None,
    ) -> ConfigDef:
        """
        Register one option.

        Args:
            name: Unique dotted key
            type: Declared value type
            default: Default value, NO_DEFAULT_VALUE for required options,
                or None for optional options with no value
            importance: Importance hint
            documentation: Human-readable description
            validator: Optional validator run after type coercion
            group: Display group
            order_in_group: Position within the group
            width: Display width hint
            display_name: Display label (defaults to the key)

        Returns:
            self, so definitions can be chained

        Raises:
            ConfigDefinitionError: If the definition is frozen, the key is
                already registered, type/importance/width is not a known
                member, or the default fails its own validation
        """
        if self._frozen:
            raise ConfigDefinitionError(
                f"Cannot define {name!r}: config definition {self.name!r} is frozen"
            )
        if name in self._options:
            raise ConfigDefinitionError(f"Configuration {name} is defined twice.")

        type = _member(ConfigType, type, name)
        importance = _member(Importance, importance, name)
        width = _member(Width, width, name)

        coerced = default
        if default is not NO_DEFAULT_VALUE and default is not None:
            adapter = TypeAdapter(_annotation_for(type, name, validator, optional=False))
            try:
                coerced = adapter.validate_python(default)
            except ValidationError as e:
                reason = _error_message(name, e.errors()[0])
                raise ConfigDefinitionError(
                    f"Invalid default for configuration {name}: {reason}"
                ) from None

        try:
            descriptor = OptionDescriptor(
                name=name,
                type=type,
                default=coerced,
                importance=importance,
                documentation=documentation,
                group=group,
                order_in_group=order_in_group,
                width=width,
                display_name=display_name or name,
                validator=validator,
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ConfigDefinitionError(
                f"Invalid {field} for configuration {name}: {error['msg']}"
            ) from None

        self._options[name] = descriptor
        if group is not None and group not in self._groups:
            self._groups.append(group)
        self._model = None

        logger.debug(f"{DEFINITION} {self.name}: defined {name} ({type.value})")
        return self

    def define_boolean(
        self, name: str, default: Any, importance: Importance, documentation: str, **kwargs: Any
    ) -> ConfigDef:
        return self.define(name, ConfigType.BOOLEAN, default, importance, documentation, **kwargs)

    def define_int(
        self, name: str, default: Any, importance: Importance, documentation: str, **kwargs: Any
    ) -> ConfigDef:
        return self.define(name, ConfigType.INT, default, importance, documentation, **kwargs)

    def define_string(
        self, name: str, default: Any, importance: Importance, documentation: str, **kwargs: Any
    ) -> ConfigDef:
        return self.define(name, ConfigType.STRING, default, importance, documentation, **kwargs)

    def freeze(self) -> ConfigDef:
        """Build the value model and reject further definitions."""
        self._value_model()
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __getitem__(self, name: str) -> OptionDescriptor:
        return self._options[name]

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def names(self) -> List[str]:
        """Option names in registration order."""
        return list(self._options)

    def groups(self) -> List[str]:
        """Group names in the order they were first used."""
        return list(self._groups)

    def default_values(self) -> Dict[str, Any]:
        """Defaults for every option that has one."""
        return {
            name: option.default
            for name, option in self._options.items()
            if not option.required
        }

    def descriptors(self) -> List[OptionDescriptor]:
        """
        Options in presentation order.

        Ungrouped options come first (by importance, then name), followed by
        each group in first-use order, sorted by order_in_group.
        """
        group_index = {group: index for index, group in enumerate(self._groups)}

        def sort_key(option: OptionDescriptor):
            if option.group is None:
                return (-1, _IMPORTANCE_RANK[option.importance], option.name, 0)
            return (group_index[option.group], 0, "", option.order_in_group)

        return sorted(self._options.values(), key=sort_key)

    def to_rst(self) -> str:
        from jsonconv.config.docs import to_rst

        return to_rst(self)

    def to_markdown(self) -> str:
        from jsonconv.config.docs import to_markdown

        return to_markdown(self)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def _value_model(self) -> Type[BaseModel]:
        if self._model is not None:
            return self._model

        fields: Dict[str, Any] = {}
        field_keys: Dict[str, str] = {}
        for index, option in enumerate(self._options.values()):
            field_name = f"option_{index}"
            annotation = _annotation_for(
                option.type, option.name, option.validator, optional=option.default is None
            )
            default = ... if option.required else option.default
            fields[field_name] = (annotation, Field(default=default, alias=option.name))
            field_keys[field_name] = option.name

        model_name = "".join(ch for ch in self.name if ch.isalnum())
        self._model = create_model(
            f"{model_name}Values",
            __config__=ConfigDict(extra="ignore", frozen=True),
            **fields,
        )
        self._field_keys = field_keys
        return self._model

    def _collect_errors(self, exc: ValidationError) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ("<root>",)
            key = self._field_keys.get(str(loc[0]), str(loc[0]))
            errors.setdefault(key, _error_message(key, error))
        return errors

    def _validate(self, props: Mapping[str, Any]) -> Tuple[Optional[BaseModel], Dict[str, str]]:
        model = self._value_model()
        raw = {str(key): value for key, value in props.items()}
        try:
            return model.model_validate(raw), {}
        except ValidationError as e:
            return None, self._collect_errors(e)

    def validate_all(self, props: Mapping[str, Any]) -> Dict[str, str]:
        """
        Validate input without raising.

        Returns:
            Mapping of option name to error message; empty when input is valid
        """
        _, errors = self._validate(props)
        return errors

    def parse(self, props: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate and coerce raw input.

        Args:
            props: Raw key/value input

        Returns:
            Value for every defined option, in registration order

        Raises:
            ConfigValidationError: If any value fails coercion or validation
        """
        instance, errors = self._validate(props)
        if errors:
            details = "; ".join(errors.values())
            logger.debug(f"{VALIDATION} {self.name}: {len(errors)} invalid option(s)")
            raise ConfigValidationError(f"Invalid configuration: {details}", errors=errors)

        dumped = instance.model_dump(by_alias=True)
        return {name: dumped[name] for name in self._options}

    def __repr__(self) -> str:
        return f"ConfigDef(name={self.name!r}, options={self.names()!r}, frozen={self._frozen})"


__all__ = ["ConfigDef", "OptionDescriptor", "NO_DEFAULT_VALUE"]
