"""
Turns a resolved widget payload into a heading row and data rows.

Every widget type has one rule per export profile. The rules are built once
from field tables, so the summary and detailed layouts share their lookups
and only differ in the extra columns the detailed profile adds.
"""
from collections.abc import Mapping

from ...constants import ExportProfile, NO_DATA_MESSAGE, WidgetType


def lookup(item, *keys, default=None):
    """
    Returns the first non-None value found under `keys` in a mapping.

    Anything that is not a mapping, and any key that is missing or None,
    falls through to `default`.
    """
    if not isinstance(item, Mapping):
        return default
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return default


def as_mapping(payload):
    return payload if isinstance(payload, Mapping) else {}


def as_sequence(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


class Field:
    """One output column: its heading and how to read it from a data point."""
    def __init__(self, heading, keys=(), default=''):
        self.heading = heading
        self.keys = tuple(keys)
        self.default = default

    def resolve(self, item):
        return lookup(item, *self.keys, default=self.default)

    def __repr__(self):
        return f'<Field {self.heading!r} {self.keys} default={self.default!r}>'


class FormatRule:
    """Headings and row extraction for one (widget type, profile) pair."""
    def headings(self, payload):
        raise NotImplementedError

    def rows(self, payload, title):
        raise NotImplementedError


class KpiRule(FormatRule):
    """A single row: the widget title as the metric name, then the KPI fields."""
    def __init__(self, fields):
        self.fields = fields

    def headings(self, payload):
        return ['Metric'] + [f.heading for f in self.fields]

    def rows(self, payload, title):
        payload = as_mapping(payload)
        return [[title] + [f.resolve(payload) for f in self.fields]]


class TableRule(FormatRule):
    def headings(self, payload):
        columns = as_sequence(as_mapping(payload).get('columns'))
        return [str(c) for c in columns] if columns else ['Data']

    def rows(self, payload, title):
        rows = []
        for row in as_sequence(as_mapping(payload).get('rows')):
            if isinstance(row, Mapping):
                rows.append(list(row.values()))
            elif isinstance(row, (list, tuple)):
                rows.append(list(row))
            else:
                rows.append([row])
        return rows


class PointsRule(FormatRule):
    """One row per entry of payload['data']."""
    def __init__(self, fields):
        self.fields = fields

    def headings(self, payload):
        return [f.heading for f in self.fields]

    def rows(self, payload, title):
        points = as_sequence(as_mapping(payload).get('data'))
        return [[f.resolve(point) for f in self.fields] for point in points]


class UnknownRule(FormatRule):
    def __init__(self, detailed):
        self.detailed = detailed

    def headings(self, payload):
        return ['Data', 'Value'] if self.detailed else ['Data']

    def rows(self, payload, title):
        return [[NO_DATA_MESSAGE, ''] if self.detailed else [NO_DATA_MESSAGE]]


def _kpi_fields(detailed):
    fields = [
        Field('Value', ('value',), 0),
        Field('Change', ('change',), 0),
        Field('Change %', ('changePercentage',), 0),
    ]
    if detailed:
        fields.append(Field('Period', ('period',), 'Current'))
    return fields


def _category_fields(detailed):
    fields = [
        Field('Category', ('category', 'name'), ''),
        Field('Value', ('value',), 0),
        Field('Percentage', ('percentage',), 0),
    ]
    if detailed:
        fields.append(Field('Color', ('color',), ''))
    return fields


def _series_fields(detailed):
    fields = [
        Field('Date/Period' if detailed else 'Date', ('date', 'x'), ''),
        Field('Value', ('value', 'y'), 0),
        Field('Series', ('series',), 'Default' if detailed else ''),
    ]
    if detailed:
        fields.append(Field('Trend', ('trend',), ''))
    return fields


def _heatmap_fields(detailed):
    fields = [
        Field('X Axis', ('x',), ''),
        Field('Y Axis', ('y',), ''),
        Field('Value', ('value',), 0),
        Field('Intensity', ('intensity',), 0),
    ]
    if detailed:
        fields.append(Field('Color', ('color',), ''))
    return fields


def build_rules():
    """Builds the (widget type, profile) -> FormatRule dispatch table."""
    rules = {}
    for profile in (ExportProfile.SUMMARY, ExportProfile.DETAILED):
        detailed = profile == ExportProfile.DETAILED
        category_rule = PointsRule(_category_fields(detailed))
        rules.update({
            (WidgetType.KPI, profile): KpiRule(_kpi_fields(detailed)),
            (WidgetType.TABLE, profile): TableRule(),
            (WidgetType.PIE_CHART, profile): category_rule,
            (WidgetType.BAR_CHART, profile): category_rule,
            (WidgetType.LINE_CHART, profile): PointsRule(_series_fields(detailed)),
            (WidgetType.HEATMAP, profile): PointsRule(_heatmap_fields(detailed)),
            (WidgetType.UNKNOWN, profile): UnknownRule(detailed),
        })
    return rules


class WidgetTypeFormatter:
    """Formats widget payloads for export sheets."""
    def __init__(self, rules=None):
        self.rules = rules if rules is not None else build_rules()

    def rule_for(self, widget_type, profile=ExportProfile.SUMMARY):
        try:
            return self.rules[(WidgetType.resolve(widget_type), profile)]
        except KeyError:
            raise ValueError(f"Unknown export profile: {profile}") from None

    def headings(self, widget_type, payload, profile=ExportProfile.SUMMARY):
        return self.rule_for(widget_type, profile).headings(payload)

    def rows(self, widget_type, payload, profile=ExportProfile.SUMMARY, title=''):
        return self.rule_for(widget_type, profile).rows(payload, title)

    def format(self, widget_type, payload, profile=ExportProfile.SUMMARY, title=''):
        """
        Args:
            widget_type (str): One of WidgetType.ALL; anything else formats as Unknown.
            payload: The resolved widget data. Malformed payloads format as empty.
            profile (str): ExportProfile.SUMMARY or ExportProfile.DETAILED.
            title (str): Widget title, used as the KPI metric name.

        Returns:
            tuple: (headings, rows)
        """
        rule = self.rule_for(widget_type, profile)
        return rule.headings(payload), rule.rows(payload, title)
