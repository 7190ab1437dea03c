"""Light domain models"""

from pydantic import BaseModel, ConfigDict, Field


class ColorModel(BaseModel):
    """HSL color of a light

    saturation and lightness are expected in [0, 1] but are not validated.
    """

    model_config = ConfigDict(from_attributes=True)

    hue: int = Field(..., description="Hue in degrees")
    saturation: float
    lightness: float


class LightModel(BaseModel):
    """Light domain model"""

    # Pydantic V2 configuration
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "52783cc8-8857-4e54-9461-8fabfc9812c6",
                "name": "Reading Lamp",
                "on": True,
                "brightness": 0.6,
                "color": {"hue": 67, "saturation": 0.77, "lightness": 0.76}
            }
        }
    )

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    on: bool
    brightness: float  # expected in [0, 1], not validated
    color: ColorModel
