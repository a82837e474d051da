from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _match_field_names(cls, data):
    """Map keys onto field names ignoring case; an exact match wins."""
    if not isinstance(data, dict):
        return data
    out = {}
    for key, value in data.items():
        if key in cls.model_fields:
            out[key] = value
            continue
        lowered = key.lower() if isinstance(key, str) else key
        field = next((f for f in cls.model_fields if f.lower() == lowered), None)
        if field is None:
            out[key] = value
        elif field not in data:
            out[field] = value
    return out


class CityRequest(BaseModel):
    """POST body for /city."""
    model_config = ConfigDict(strict=True)

    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data):
        return _match_field_names(cls, data)

    @field_validator("name", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        if v is None:
            return ""
        return v


class WeatherInfo(BaseModel):
    """Weather record as returned by the provider, passed through unvalidated."""
    model_config = ConfigDict(strict=True)

    temperature: str = ""
    wind: str = ""
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data):
        return _match_field_names(cls, data)

    @field_validator("temperature", "wind", "description", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        # JSON null leaves the field at its zero value
        if v is None:
            return ""
        return v
