"""Edit a stored value through a generic property sheet.

The sheet only knows the descriptor tuples; it never sees ids or repositories.
"""

from dataclasses import dataclass

from domo import LocalRepository, backed_property, describe, value_type


@value_type
@dataclass(frozen=True)
class Lamp:
    name: str
    brightness: int = 50
    _watts: float = 9.5

    @backed_property(slot="_watts")
    def watts(self) -> float:
        return self._watts


def print_sheet(rows) -> None:
    for name, attribute_type, writable, getter, _ in rows:
        flag = "rw" if writable else "ro"
        type_name = getattr(attribute_type, "__name__", attribute_type)
        print(f"  {name:<12} {type_name!s:<8} {flag} {getter()!r}")


def main() -> None:
    repository = LocalRepository()
    lamp = repository.model(repository.add(Lamp("desk")))
    lamp.subscribe(lambda model, event: print(f"changed: {model.value}"))
    before = lamp.value

    rows = describe(lamp)
    print_sheet(rows)

    setters = {name: setter for name, _, _, _, setter in rows}
    setters["brightness"](80)
    setters["watts"](12.0)
    lamp.notify_changed()

    dynamic = lamp.as_dynamic()
    dynamic.name = "reading"
    print(f"now: {dynamic}, before: {before}")

    lamp.dispose()


if __name__ == "__main__":
    main()
