"""
Tests for summary chart functions.
Verifies chart generation and structure without testing visual output.
"""
import unittest
import numpy as np
from wizard_charts import create_pay_by_years_chart, create_lump_sum_breakdown_chart


class TestWizardCharts(unittest.TestCase):

    def test_pay_by_years_chart(self):
        fig = create_pay_by_years_chart(2468.40, 20)

        self.assertEqual(len(fig.data), 2)
        line, marker = fig.data
        self.assertEqual(len(line.x), 41)
        self.assertEqual(line.x[0], 0)
        self.assertEqual(line.x[-1], 40)
        self.assertAlmostEqual(line.y[-1], 2468.40 * 0.02 * 40)
        self.assertEqual(list(marker.x), [20])
        self.assertAlmostEqual(marker.y[0], 2468.40 * 0.02 * 20)
        self.assertIn("Years of Service", fig.layout.title.text)

    def test_pay_by_years_line_is_increasing(self):
        fig = create_pay_by_years_chart(5000.0, 10)
        self.assertTrue(np.all(np.diff(fig.data[0].y) > 0))

    def test_lump_sum_breakdown(self):
        monthly_pay = 1000.0
        lump_sum = monthly_pay * 1020 * 0.25
        fig = create_lump_sum_breakdown_chart(monthly_pay, lump_sum)

        values = list(fig.data[0].values)
        self.assertAlmostEqual(values[0], lump_sum)
        self.assertAlmostEqual(values[1], monthly_pay * 1020 * 0.75)
        self.assertEqual(list(fig.data[0].labels), ['Lump Sum', 'Remaining Value'])

    def test_lump_sum_breakdown_custom_life_expectancy(self):
        fig = create_lump_sum_breakdown_chart(1000.0, 480_000.0, life_expectancy=80)
        self.assertAlmostEqual(fig.data[0].values[1], 480_000.0)


if __name__ == '__main__':
    unittest.main()
