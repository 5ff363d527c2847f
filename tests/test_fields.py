from cronfields.fields import FieldDomain, FieldKind


class TestFieldKind:
    def test_order_matches_positions(self):
        assert [kind.position for kind in FieldKind] == [0, 1, 2, 3, 4, 5]

    def test_display_names(self):
        assert [kind.display_name for kind in FieldKind] == [
            "minute",
            "hour",
            "day of month",
            "month",
            "day of week",
            "command",
        ]

    def test_time_fields_exclude_command(self):
        assert FieldKind.COMMAND not in FieldKind.time_fields()
        assert len(FieldKind.time_fields()) == 5

    def test_command_has_no_domain(self):
        assert FieldKind.COMMAND.domain is None
        assert not FieldKind.COMMAND.is_time_field

    def test_domains(self):
        assert FieldKind.MINUTE.domain == FieldDomain(0, 59, 0, "minute")
        assert FieldKind.DAY_OF_MONTH.domain == FieldDomain(1, 31, 2, "day of month")
        for kind in FieldKind.time_fields():
            assert kind.domain.min_value <= kind.domain.max_value


class TestFieldDomain:
    def test_contains_is_inclusive(self):
        domain = FieldKind.MONTH.domain
        assert domain.contains(1)
        assert domain.contains(12)
        assert not domain.contains(0)
        assert not domain.contains(13)

    def test_values(self):
        assert FieldKind.DAY_OF_WEEK.domain.values() == [0, 1, 2, 3, 4, 5, 6]
