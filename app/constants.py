class WidgetType:
    """
    Widget type names as stored on Widget.type.
    Anything outside ALL is treated as UNKNOWN by the export formatter.
    """
    KPI = 'KPI'
    TABLE = 'Table'
    PIE_CHART = 'PieChart'
    BAR_CHART = 'BarChart'
    LINE_CHART = 'LineChart'
    HEATMAP = 'Heatmap'
    UNKNOWN = 'Unknown'

    ALL = (KPI, TABLE, PIE_CHART, BAR_CHART, LINE_CHART, HEATMAP)

    @classmethod
    def resolve(cls, value):
        return value if value in cls.ALL else cls.UNKNOWN


class ExportProfile:
    """
    SUMMARY is used for detail sheets inside a dashboard bundle,
    DETAILED for a standalone single-widget export.
    """
    SUMMARY = 'summary'
    DETAILED = 'detailed'


class RaggedRowPolicy:
    PAD = 'pad'
    PRESERVE = 'preserve'


# Export formatting conventions
EXPORT_DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
EXPORT_FILENAME_TIMESTAMP_FORMAT = '%Y-%m-%d_%H-%M-%S'
SHEET_TITLE_MAX_LENGTH = 30
TRUNCATION_MARKER = '...'
RAGGED_ROW_POLICY = RaggedRowPolicy.PAD

SUMMARY_SHEET_TITLE = 'Dashboard Summary'
SUMMARY_COLUMN_COUNT = 5
FILTERS_APPLIED_PREFIX = 'Filters Applied: '
NO_DATA_MESSAGE = 'No data available'
UNKNOWN_OWNER = 'Unknown'
