from datetime import date

from django.http import QueryDict
from django.test import SimpleTestCase

from experience.categories import Industry, ProjectType, Tool
from experience.filters import FilterSpec, filter_options, filter_projects, matches
from experience.metrics import ProjectRecord


def make_record(record_id, **overrides) -> ProjectRecord:
    data = {
        'id': record_id,
        'name': f'Project {record_id}',
        'start_date': date(2022, 1, 1),
        'end_date': date(2022, 6, 1),
    }
    data.update(overrides)
    return ProjectRecord(**data)


class FilterSpecTests(SimpleTestCase):

    def test_from_query_dict(self) -> None:
        params = QueryDict('q=+bank+&industry=Retail&industry=Energy&tool=altus&year=2022,2021')
        spec = FilterSpec.from_query_params(params)

        self.assertEqual(spec.search, 'bank')
        self.assertEqual(spec.industries, frozenset({'Retail', 'Energy'}))
        self.assertEqual(spec.tools, frozenset({'altus'}))
        self.assertEqual(spec.years, frozenset({'2022', '2021'}))
        self.assertEqual(spec.types, frozenset())
        self.assertTrue(spec.is_active)

    def test_from_plain_dict(self) -> None:
        spec = FilterSpec.from_query_params({'type': 'PMI,Org DD', 'industry': ['Retail']})
        self.assertEqual(spec.types, frozenset({'PMI', 'Org DD'}))
        self.assertEqual(spec.industries, frozenset({'Retail'}))

    def test_empty_spec_is_inactive(self) -> None:
        self.assertFalse(FilterSpec.from_query_params({}).is_active)


class MatchesTests(SimpleTestCase):

    def setUp(self) -> None:
        self.records = [
            make_record(
                'a',
                name='Bank merger',
                industry=Industry.FINANCIAL_SERVICES,
                project_type=ProjectType.PMI,
                tools=(Tool.ALTUS,),
            ),
            make_record(
                'b',
                name='Store network review',
                description='Right-sizing for a bank-owned retailer',
                industry=Industry.RETAIL,
                project_type=ProjectType.RIGHT_SIZING,
                tools=(Tool.MODAS, Tool.ALTUS),
                start_date=date(2021, 3, 1),
            ),
            make_record('c', name='Grid operating model', industry=Industry.ENERGY),
        ]

    def ids(self, spec):
        return [p.id for p in filter_projects(self.records, spec)]

    def test_empty_spec_passes_everything(self) -> None:
        self.assertEqual(self.ids(FilterSpec()), ['a', 'b', 'c'])

    def test_search_covers_name_and_description(self) -> None:
        self.assertEqual(self.ids(FilterSpec(search='BANK')), ['a', 'b'])

    def test_search_can_skip_description(self) -> None:
        self.assertEqual(self.ids(FilterSpec(search='bank', search_description=False)), ['a'])

    def test_missing_description_is_not_an_error(self) -> None:
        self.assertFalse(matches(self.records[2], FilterSpec(search='retailer')))

    def test_or_within_dimension(self) -> None:
        spec = FilterSpec(industries={'Retail', 'Energy'})
        self.assertEqual(self.ids(spec), ['b', 'c'])

    def test_and_across_dimensions(self) -> None:
        spec = FilterSpec(industries={'Retail', 'Financial Services'}, years={'2022'})
        self.assertEqual(self.ids(spec), ['a'])

    def test_tool_filter_matches_any_tag(self) -> None:
        self.assertEqual(self.ids(FilterSpec(tools={'altus'})), ['a', 'b'])
        self.assertEqual(self.ids(FilterSpec(tools={'none'})), ['c'])

    def test_type_filter(self) -> None:
        self.assertEqual(self.ids(FilterSpec(types={'Right-sizing'})), ['b'])

    def test_adding_values_never_narrows(self) -> None:
        selections = [
            ('industries', ['Retail', 'Energy', 'Healthcare']),
            ('types', ['PMI', 'Other', 'Org DD']),
            ('tools', ['modas', 'altus', 'none']),
            ('years', ['2021', '2022', '2020']),
        ]
        for dimension, values in selections:
            previous = 0
            for size in range(1, len(values) + 1):
                spec = FilterSpec(**{dimension: values[:size]})
                count = len(filter_projects(self.records, spec))
                self.assertGreaterEqual(count, previous, dimension)
                previous = count


class FilterOptionsTests(SimpleTestCase):

    def test_options_follow_registry_order(self) -> None:
        records = [
            make_record('a', industry=Industry.RETAIL, tools=(Tool.MODAS,), start_date=date(2020, 5, 1)),
            make_record('b', industry=Industry.TECHNOLOGY, project_type=ProjectType.PMI),
            make_record('c', industry=Industry.RETAIL, start_date=date(2023, 2, 1), end_date=date(2023, 3, 1)),
        ]

        options = filter_options(records)

        self.assertEqual(options['industries'], ['Technology', 'Retail'])
        self.assertEqual(options['types'], ['PMI', 'Other'])
        self.assertEqual(options['tools'], ['modas'])
        self.assertEqual(options['years'], ['2023', '2022', '2020'])

    def test_no_projects(self) -> None:
        self.assertEqual(
            filter_options([]),
            {'industries': [], 'types': [], 'tools': [], 'years': []},
        )
