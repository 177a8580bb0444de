"""Admin listing form (multipart/form-data).

Every field arrives as free text; numbers are parsed by the use case so that
locale formats like ``45.000,50`` are accepted.
"""

from __future__ import annotations

from typing import Any

from fastapi import Form
from pydantic import BaseModel


class VehicleFormDTO(BaseModel):
    title: str | None = None
    brand: str | None = None
    model: str | None = None
    year: str | None = None
    price: str | None = None
    price_display: str | None = None
    status: str | None = None
    description: str | None = None
    colour: str | None = None
    interior: str | None = None
    wheel: str | None = None
    safety: str | None = None
    trim: str | None = None
    stock_number: str | None = None
    vin: str | None = None
    top_speed: str | None = None
    time_to_60: str | None = None
    mileage: str | None = None
    engine: str | None = None
    cylinders: str | None = None
    gearbox: str | None = None
    transmission: str | None = None
    body: str | None = None
    drivetrain: str | None = None
    technology: str | None = None
    subtitle: str | None = None
    range_km: str | None = None
    range_description: str | None = None

    @classmethod
    def as_form(
        cls,
        title: str | None = Form(None),
        brand: str | None = Form(None),
        model: str | None = Form(None),
        year: str | None = Form(None),
        price: str | None = Form(None),
        price_display: str | None = Form(None, alias="priceDisplay"),
        status: str | None = Form(None),
        description: str | None = Form(None),
        colour: str | None = Form(None),
        interior: str | None = Form(None),
        wheel: str | None = Form(None),
        safety: str | None = Form(None),
        trim: str | None = Form(None),
        stock_number: str | None = Form(None, alias="stockNumber"),
        vin: str | None = Form(None),
        top_speed: str | None = Form(None, alias="topSpeed"),
        time_to_60: str | None = Form(None, alias="timeTo60"),
        mileage: str | None = Form(None),
        engine: str | None = Form(None),
        cylinders: str | None = Form(None),
        gearbox: str | None = Form(None),
        transmission: str | None = Form(None),
        body: str | None = Form(None),
        drivetrain: str | None = Form(None),
        technology: str | None = Form(None),
        subtitle: str | None = Form(None),
        range_km: str | None = Form(None, alias="range"),
        range_description: str | None = Form(None, alias="rangeDescription"),
    ) -> VehicleFormDTO:
        """FastAPI dependency reading the form fields (``Depends(VehicleFormDTO.as_form)``)."""
        return cls(
            title=title,
            brand=brand,
            model=model,
            year=year,
            price=price,
            price_display=price_display,
            status=status,
            description=description,
            colour=colour,
            interior=interior,
            wheel=wheel,
            safety=safety,
            trim=trim,
            stock_number=stock_number,
            vin=vin,
            top_speed=top_speed,
            time_to_60=time_to_60,
            mileage=mileage,
            engine=engine,
            cylinders=cylinders,
            gearbox=gearbox,
            transmission=transmission,
            body=body,
            drivetrain=drivetrain,
            technology=technology,
            subtitle=subtitle,
            range_km=range_km,
            range_description=range_description,
        )

    def fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
