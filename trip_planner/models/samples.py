"""
Demo trips used to seed an empty store.
"""
from datetime import date, time, timedelta
from typing import Optional

from .accent import EventAccent
from .trip import EventItem, Trip, TripDay


def _event(title: str, description: str, at: time, location: str, icon: str, accent: EventAccent) -> EventItem:
    return EventItem(
        title=title,
        description=description,
        start_time=at,
        location=location,
        icon=icon,
        accent=accent,
    )


def sample_trips(today: Optional[date] = None) -> list[Trip]:
    """Portugal (fully planned), New York and Cancun."""
    base = today or date.today()

    portugal_days = [
        TripDay(
            date=base,
            order=1,
            label="Lisbon Arrival",
            weather_icon="cloud.sun.fill",
            temperature_f=72,
            events=[
                _event("Brunch at Fauna & Flora", "Fresh bowls and coffee with a view of pink buildings.",
                       time(9, 30), "Alfama", "fork.knife", EventAccent.LAVENDER),
                _event("Castle Walk", "Explore Castelo de S. Jorge and the winding streets around it.",
                       time(11, 15), "Castelo", "building.columns", EventAccent.BURNT_ORANGE),
                _event("Sunset at Miradouro", "Golden hour photos above the river.",
                       time(18, 45), "Miradouro da Graça", "sunset.fill", EventAccent.GOLD),
            ],
        ),
        TripDay(
            date=base + timedelta(days=1),
            order=2,
            label="Design Day",
            weather_icon="sun.max.fill",
            temperature_f=75,
            events=[
                _event("LX Factory", "Design shops and coffee under the bridge.",
                       time(10, 0), "Alcântara", "bag.fill", EventAccent.SAND),
                _event("Bike to Belém", "Pastéis de Nata stop and riverside ride.",
                       time(14, 0), "Belém", "bicycle", EventAccent.SKY),
            ],
        ),
        TripDay(
            date=base + timedelta(days=2),
            order=3,
            label="Coastal Escape",
            weather_icon="cloud.sun.rain.fill",
            temperature_f=70,
            events=[
                _event("Train to Cascais", "Coastal views on the way to the beaches.",
                       time(9, 15), "Cais do Sodré", "train.side.front.car", EventAccent.DEEP_NAVY),
                _event("Beach picnic", "Relax on Praia da Rainha with pastel de nata.",
                       time(12, 30), "Cascais", "beach.umbrella.fill", EventAccent.MINT),
                _event("Seafood dinner", "Catch of the day at a local marisqueira.",
                       time(19, 0), "Cascais Marina", "fork.knife.circle.fill", EventAccent.FOREST),
            ],
        ),
    ]

    return [
        Trip(
            name="Portugal Adventure",
            destination="Lisbon • Cascais",
            start_date=base,
            end_date=base + timedelta(days=2),
            notes="Explore the city and coast",
            latitude=38.7223,
            longitude=-9.1393,
            days=portugal_days,
        ),
        Trip(
            name="Business Conference",
            destination="New York, USA",
            start_date=base + timedelta(days=14),
            end_date=base + timedelta(days=17),
            notes="Tech conference downtown",
            image_name="building.2",
            latitude=40.7128,
            longitude=-74.0060,
        ),
        Trip(
            name="Beach Getaway",
            destination="Cancun, Mexico",
            start_date=base + timedelta(days=60),
            end_date=base + timedelta(days=67),
            notes="Relax and unwind",
            image_name="sun.max",
            latitude=21.1619,
            longitude=-86.8515,
        ),
    ]
