"""Datos de prueba con la forma del servicio de usuarios."""

from __future__ import annotations

from usuarios_app.models.user import Address, Geo, User

LEANNE = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "address": {
        "street": "Kulas Light",
        "suite": "Apt. 556",
        "city": "Gwenborough",
        "zipcode": "92998-3874",
        "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
}


def make_user(
    id: int,
    name: str,
    username: str = "user",
    email: str = "user@example.com",
    lat: str = "0",
    lng: str = "0",
) -> User:
    return User(
        id=id,
        name=name,
        username=username,
        email=email,
        address=Address(
            street="Calle Falsa 123",
            city="Springfield",
            zipcode="00000",
            geo=Geo(lat=lat, lng=lng),
        ),
    )


def sample_users() -> tuple[User, ...]:
    return (
        make_user(1, "Leanne Graham", "Bret", "Sincere@april.biz", "-37.3159", "81.1496"),
        make_user(2, "Ervin Howell", "Antonette", "Shanna@melissa.tv", "-43.9509", "-34.4618"),
        make_user(7, "Kurtis Weissnat", "Elwyn.Skiles", "Telly.Hoeger@billy.biz", "24.8918", "21.8984"),
        make_user(10, "Clementina DuBuque", "Moriah.Stanton", "Rey.Padberg@karina.biz", "-38.2386", "57.2232"),
        make_user(17, "Glenna Reichert", "Delphine", "Chaim_McDermott@dana.io", "24.6463", "-168.8889"),
    )
