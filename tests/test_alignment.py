"""Tests for multi-series date alignment."""

from processing import MomentumResult, align_series, common_dates


def _series(dates, start=100.0, baseline=None):
    return MomentumResult(
        dates=list(dates),
        values=[start + i for i in range(len(dates))],
        baseline_date=baseline or (dates[0] if dates else None),
    )


class TestAlignSeries:

    def test_truncates_to_intersection(self):
        results = {
            'a': _series(['d1', 'd2', 'd3']),
            'b': _series(['d2', 'd3', 'd4']),
        }

        aligned = align_series(results)

        assert aligned['a'].dates == ['d2', 'd3']
        assert aligned['b'].dates == ['d2', 'd3']

    def test_keeps_values_paired_with_dates(self):
        results = {
            'a': MomentumResult(['2024-01-02', '2024-01-03', '2024-01-04'], [100.0, 101.0, 102.0], '2024-01-02'),
            'b': MomentumResult(['2024-01-03', '2024-01-04'], [100.0, 99.0], '2024-01-03'),
        }

        aligned = align_series(results)

        assert aligned['a'].values == [101.0, 102.0]
        assert aligned['b'].values == [100.0, 99.0]

    def test_preserves_baseline_dates(self):
        results = {
            'a': _series(['d1', 'd2'], baseline='d1'),
            'b': _series(['d2', 'd3'], baseline='d2'),
        }

        aligned = align_series(results)

        assert aligned['a'].baseline_date == 'd1'
        assert aligned['b'].baseline_date == 'd2'

    def test_all_outputs_share_dates(self):
        results = {
            'a': _series(['d1', 'd2', 'd4', 'd5', 'd7']),
            'b': _series(['d2', 'd3', 'd4', 'd5']),
            'c': _series(['d0', 'd2', 'd4', 'd5', 'd6']),
        }

        aligned = align_series(results)
        date_lists = [result.dates for result in aligned.values()]

        assert all(dates == date_lists[0] for dates in date_lists)
        assert date_lists[0] == ['d2', 'd4', 'd5']

    def test_idempotent(self):
        results = {
            'a': _series(['d1', 'd2', 'd3']),
            'b': _series(['d2', 'd3', 'd4']),
        }

        once = align_series(results)
        twice = align_series(once)

        assert twice == once

    def test_empty_intersection_empties_everything(self):
        results = {
            'a': _series(['d1', 'd2']),
            'b': _series(['d3', 'd4']),
        }

        aligned = align_series(results)

        assert set(aligned) == {'a', 'b'}
        assert all(result.dates == [] and result.values == [] for result in aligned.values())

    def test_single_series_unchanged(self):
        series = _series(['d1', 'd2', 'd3'])
        assert align_series({'a': series}) == {'a': series}

    def test_no_series(self):
        assert align_series({}) == {}
        assert common_dates({}) == set()
