from showroom.models.technician import Technician


class _Fixed:
    def get_description(self):
        return "X"


def test_technician_update_line(capsys):
    assert Technician(hourly_rate=42).update(_Fixed()) is None
    assert capsys.readouterr().out == "Technician updated about X\n"


def test_technician_notified_through_vehicle(motorbike, capsys):
    motorbike.add_observer(Technician(100))
    motorbike.notify_observers()
    assert capsys.readouterr().out.splitlines() == [
        "Technician updated about Small MotorBike with Good and Driver",
    ]


def test_technicians_with_same_rate_are_distinct(motorbike, capsys):
    t1, t2 = Technician(100), Technician(100)
    assert t1 != t2
    assert len({t1, t2}) == 2
    motorbike.add_observer(t1)
    motorbike.add_observer(t2)
    motorbike.notify_observers()
    assert len(capsys.readouterr().out.splitlines()) == 2
