"""Bilingual name, summary and calculation-method text for every analysis id.

Rows are ``(id, english, arabic)`` where each language part is
``(name, summary, method)``. Balance-sheet figures are period-end values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from fsa_engine.domain.models.financials import SUPPORTED_LANGUAGES


@dataclass(frozen=True)
class AnalysisText:
    name: str
    summary: str
    method: str


_Part = Tuple[str, str, str]
_Row = Tuple[str, _Part, _Part]


# ----------------------------
# Tier 1: classical
# ----------------------------

CLASSICAL_TEXT: List[_Row] = [
    (
        "vertical_analysis",
        (
            "Vertical Analysis",
            "Expresses every statement line as a percentage of a single base figure (total assets or sales)",
            "Line item ÷ Base figure × 100; headline value is the gross profit margin",
        ),
        (
            "التحليل الرأسي",
            "تحويل جميع بنود القوائم المالية إلى نسب مئوية من رقم أساسي واحد (إجمالي الأصول أو المبيعات)",
            "البند ÷ الرقم الأساسي × 100، والقيمة الرئيسية هي هامش الربح الإجمالي",
        ),
    ),
    (
        "horizontal_analysis",
        (
            "Horizontal Analysis",
            "Compares statement items across consecutive periods to measure growth and change",
            "(Current value - Previous value) ÷ |Previous value| × 100; headline value is revenue growth",
        ),
        (
            "التحليل الأفقي",
            "مقارنة بنود القوائم المالية عبر الفترات المتتالية لقياس النمو والتغير",
            "(القيمة الحالية - القيمة السابقة) ÷ |القيمة السابقة| × 100، والقيمة الرئيسية هي نمو الإيرادات",
        ),
    ),
    (
        "mixed_analysis",
        (
            "Mixed Analysis",
            "Combines structural percentages with period-over-period growth in one view",
            "Operating income ÷ Revenue × 100, with equity share and growth rates as details",
        ),
        (
            "التحليل المختلط",
            "يجمع بين النسب الهيكلية ومعدلات النمو بين الفترات في عرض واحد",
            "الربح التشغيلي ÷ الإيرادات × 100 مع نسبة حقوق الملكية ومعدلات النمو كتفاصيل",
        ),
    ),
    (
        "trend_analysis",
        (
            "Trend Analysis",
            "Measures the compound annual growth of revenue over the analysed periods",
            "((Last revenue ÷ First revenue) ^ (1 ÷ years) - 1) × 100",
        ),
        (
            "تحليل الاتجاه",
            "يقيس معدل النمو السنوي المركب للإيرادات خلال الفترات المحللة",
            "((الإيرادات الأخيرة ÷ الإيرادات الأولى) ^ (1 ÷ عدد السنوات) - 1) × 100",
        ),
    ),
    (
        "basic_comparative_analysis",
        (
            "Basic Comparative Analysis",
            "Compares the company's net margin with the industry reference",
            "Net income ÷ Revenue × 100",
        ),
        (
            "التحليل المقارن الأساسي",
            "مقارنة هامش صافي الربح للشركة مع المرجع القطاعي",
            "صافي الربح ÷ الإيرادات × 100",
        ),
    ),
    (
        "value_added_analysis",
        (
            "Value Added Analysis",
            "Measures the share of sales retained as value created by the company's own operations",
            "(Revenue - COGS - Other operating expenses) ÷ Revenue × 100",
        ),
        (
            "تحليل القيمة المضافة",
            "يقيس نسبة المبيعات المحتفظ بها كقيمة مضافة من عمليات الشركة الذاتية",
            "(الإيرادات - تكلفة المبيعات - المصروفات التشغيلية الأخرى) ÷ الإيرادات × 100",
        ),
    ),
    (
        "common_size_analysis",
        (
            "Common Size Analysis",
            "Restates the income statement as percentages of revenue to expose the cost structure",
            "Total operating expenses ÷ Revenue × 100, with each cost line as a detail",
        ),
        (
            "تحليل الحجم المشترك",
            "إعادة عرض قائمة الدخل كنسب مئوية من الإيرادات لإظهار هيكل التكاليف",
            "إجمالي المصروفات التشغيلية ÷ الإيرادات × 100 مع كل بند تكلفة كتفصيل",
        ),
    ),
    (
        "simple_time_series",
        (
            "Simple Time Series Analysis",
            "Averages the period-to-period change in revenue",
            "Mean of (Revenue(t) - Revenue(t-1)) ÷ |Revenue(t-1)| × 100",
        ),
        (
            "تحليل السلاسل الزمنية البسيط",
            "متوسط التغير في الإيرادات من فترة إلى أخرى",
            "متوسط (الإيرادات(ت) - الإيرادات(ت-1)) ÷ |الإيرادات(ت-1)| × 100",
        ),
    ),
    (
        "relative_changes",
        (
            "Relative Changes Analysis",
            "Measures the relative change in net income against the previous period",
            "(Current net income - Previous net income) ÷ |Previous net income| × 100",
        ),
        (
            "تحليل التغيرات النسبية",
            "يقيس التغير النسبي في صافي الربح مقارنة بالفترة السابقة",
            "(صافي الربح الحالي - صافي الربح السابق) ÷ |صافي الربح السابق| × 100",
        ),
    ),
    (
        "growth_rates",
        (
            "Growth Rates Analysis",
            "Averages the growth of revenue, net income, total assets and equity",
            "Mean of the four period-over-period growth rates",
        ),
        (
            "تحليل معدلات النمو",
            "متوسط نمو الإيرادات وصافي الربح وإجمالي الأصول وحقوق الملكية",
            "متوسط معدلات النمو الأربعة بين الفترتين",
        ),
    ),
    (
        "basic_deviation",
        (
            "Basic Deviation Analysis",
            "Measures how far the current net margin deviates from its historical mean",
            "|Current net margin - Mean net margin| in percentage points",
        ),
        (
            "تحليل الانحرافات الأساسي",
            "تحليل الانحرافات عن المعايير والتوقعات",
            "|هامش صافي الربح الحالي - متوسط هامش صافي الربح| بالنقاط المئوية",
        ),
    ),
    (
        "simple_variance",
        (
            "Simple Variance Analysis",
            "Measures the dispersion of the net margin across periods",
            "Population variance of the net margin (percentage points squared)",
        ),
        (
            "تحليل التباين البسيط",
            "تحليل التباين في الأداء المالي",
            "تباين هامش صافي الربح عبر الفترات",
        ),
    ),
    (
        "index_numbers",
        (
            "Index Numbers Analysis",
            "Tracks revenue as an index with the first period as base 100",
            "Current revenue ÷ First-period revenue × 100",
        ),
        (
            "تحليل الأرقام القياسية",
            "تحليل الأرقام القياسية للاتجاهات المالية",
            "الإيرادات الحالية ÷ إيرادات الفترة الأولى × 100",
        ),
    ),
    # Liquidity
    (
        "current_ratio",
        (
            "Current Ratio",
            "Measures the company's ability to meet short-term obligations with its current assets",
            "Current assets ÷ Current liabilities",
        ),
        (
            "النسبة الجارية",
            "تقيس قدرة الشركة على الوفاء بالتزاماتها قصيرة الأجل باستخدام أصولها الجارية",
            "الأصول الجارية ÷ الخصوم الجارية",
        ),
    ),
    (
        "quick_ratio",
        (
            "Quick Ratio",
            "Measures the ability to meet short-term obligations using the most liquid assets",
            "(Current assets - Inventory - Prepaid expenses) ÷ Current liabilities",
        ),
        (
            "النسبة السريعة",
            "تقيس قدرة الشركة على الوفاء بالتزاماتها قصيرة الأجل باستخدام أكثر الأصول سيولة",
            "(الأصول الجارية - المخزون - المصروفات المدفوعة مقدماً) ÷ الخصوم الجارية",
        ),
    ),
    (
        "cash_ratio",
        (
            "Cash Ratio",
            "Measures the ability to meet short-term obligations with cash and short-term investments only",
            "(Cash + Short-term investments) ÷ Current liabilities",
        ),
        (
            "نسبة النقد",
            "تقيس قدرة الشركة على الوفاء بالتزاماتها قصيرة الأجل باستخدام النقد والاستثمارات قصيرة الأجل فقط",
            "(النقد + الاستثمارات قصيرة الأجل) ÷ الخصوم الجارية",
        ),
    ),
    (
        "operating_cash_flow_ratio",
        (
            "Operating Cash Flow Ratio",
            "Measures whether operations generate enough cash to cover short-term obligations",
            "Cash flow from operations ÷ Current liabilities",
        ),
        (
            "نسبة التدفق النقدي التشغيلي",
            "تقيس قدرة الشركة على توليد نقد كافٍ من عملياتها لتغطية التزاماتها قصيرة الأجل",
            "التدفق النقدي من العمليات ÷ الخصوم الجارية",
        ),
    ),
    (
        "working_capital_ratio",
        (
            "Working Capital Ratio",
            "Measures the adequacy of working capital relative to total assets",
            "(Current assets - Current liabilities) ÷ Total assets",
        ),
        (
            "نسبة رأس المال العامل",
            "تقيس كفاية رأس المال العامل نسبة إلى إجمالي الأصول",
            "(الأصول الجارية - الخصوم الجارية) ÷ إجمالي الأصول",
        ),
    ),
    (
        "defensive_interval",
        (
            "Defensive Interval Ratio",
            "Measures how many days liquid assets can fund operating cash expenses without new revenue",
            "(Cash + Short-term investments + Receivables) ÷ Daily operating cash expenses",
        ),
        (
            "فترة الدفاع",
            "تقيس عدد الأيام التي يمكن للأصول السائلة فيها تمويل المصروفات التشغيلية النقدية دون إيرادات جديدة",
            "(النقد + الاستثمارات قصيرة الأجل + الذمم المدينة) ÷ المصروفات التشغيلية النقدية اليومية",
        ),
    ),
    (
        "cash_to_current_assets",
        (
            "Cash to Current Assets",
            "Measures the share of current assets held as cash",
            "Cash ÷ Current assets",
        ),
        (
            "نسبة النقد إلى الأصول الجارية",
            "تقيس نسبة الأصول الجارية المحتفظ بها في صورة نقد",
            "النقد ÷ الأصول الجارية",
        ),
    ),
    (
        "net_working_capital_ratio",
        (
            "Net Working Capital to Sales",
            "Measures the working capital cushion relative to the scale of sales",
            "(Current assets - Current liabilities) ÷ Revenue",
        ),
        (
            "نسبة صافي رأس المال العامل إلى المبيعات",
            "تقيس هامش رأس المال العامل نسبة إلى حجم المبيعات",
            "(الأصول الجارية - الخصوم الجارية) ÷ الإيرادات",
        ),
    ),
    (
        "inventory_to_working_capital",
        (
            "Inventory to Working Capital",
            "Measures how much of working capital is tied up in inventory",
            "Inventory ÷ (Current assets - Current liabilities)",
        ),
        (
            "نسبة المخزون إلى رأس المال العامل",
            "تقيس الجزء من رأس المال العامل المحتجز في المخزون",
            "المخزون ÷ (الأصول الجارية - الخصوم الجارية)",
        ),
    ),
    (
        "current_cash_debt_coverage",
        (
            "Current Cash Debt Coverage",
            "Measures how many times operating cash flow covers short-term debt",
            "Cash flow from operations ÷ Short-term debt",
        ),
        (
            "نسبة تغطية الدين قصير الأجل نقدياً",
            "تقيس عدد مرات تغطية التدفق النقدي التشغيلي للديون قصيرة الأجل",
            "التدفق النقدي من العمليات ÷ الديون قصيرة الأجل",
        ),
    ),
    # Activity
    (
        "inventory_turnover",
        (
            "Inventory Turnover",
            "Measures how efficiently inventory is managed and converted into sales",
            "Cost of goods sold ÷ Inventory",
        ),
        (
            "معدل دوران المخزون",
            "يقيس كفاءة الشركة في إدارة المخزون وسرعة تحويله إلى مبيعات",
            "تكلفة البضاعة المباعة ÷ المخزون",
        ),
    ),
    (
        "days_in_inventory",
        (
            "Days Sales in Inventory",
            "Measures the average number of days inventory is held before it is sold",
            "365 ÷ Inventory turnover",
        ),
        (
            "فترة بقاء المخزون",
            "يقيس متوسط عدد الأيام التي يبقى فيها المخزون قبل بيعه",
            "365 ÷ معدل دوران المخزون",
        ),
    ),
    (
        "receivables_turnover",
        (
            "Accounts Receivable Turnover",
            "Measures how efficiently the company collects amounts owed by customers",
            "Net sales ÷ Accounts receivable",
        ),
        (
            "معدل دوران الذمم المدينة",
            "يقيس كفاءة الشركة في تحصيل ديونها من العملاء",
            "صافي المبيعات ÷ الذمم المدينة",
        ),
    ),
    (
        "days_in_receivables",
        (
            "Days Sales Outstanding",
            "Measures the average number of days needed to collect customer receivables",
            "365 ÷ Receivables turnover",
        ),
        (
            "فترة التحصيل للذمم المدينة",
            "يقيس متوسط عدد الأيام المطلوبة لتحصيل الديون من العملاء",
            "365 ÷ معدل دوران الذمم المدينة",
        ),
    ),
    (
        "payables_turnover",
        (
            "Accounts Payable Turnover",
            "Measures how quickly the company pays its suppliers",
            "Cost of goods sold ÷ Accounts payable",
        ),
        (
            "معدل دوران الذمم الدائنة",
            "يقيس سرعة الشركة في سداد التزاماتها للموردين",
            "تكلفة البضاعة المباعة ÷ الذمم الدائنة",
        ),
    ),
    (
        "days_in_payables",
        (
            "Days Payable Outstanding",
            "Measures the average number of days the company takes to pay its suppliers",
            "365 ÷ Payables turnover",
        ),
        (
            "فترة السداد للذمم الدائنة",
            "يقيس متوسط عدد الأيام التي تستغرقها الشركة لسداد التزاماتها للموردين",
            "365 ÷ معدل دوران الذمم الدائنة",
        ),
    ),
    (
        "cash_conversion_cycle",
        (
            "Cash Conversion Cycle",
            "Measures the time needed to turn investment in inventory and receivables back into cash",
            "Days in inventory + Days in receivables - Days in payables",
        ),
        (
            "دورة التحويل النقدي",
            "يقيس الوقت المطلوب لتحويل الاستثمارات في المخزون والذمم إلى نقد",
            "فترة المخزون + فترة التحصيل - فترة السداد",
        ),
    ),
    (
        "operating_cycle",
        (
            "Operating Cycle",
            "Measures the time from buying inventory to collecting cash from its sale",
            "Days in inventory + Days in receivables",
        ),
        (
            "دورة التشغيل",
            "يقيس الوقت من شراء المخزون حتى تحصيل النقد من المبيعات",
            "فترة بقاء المخزون + فترة التحصيل",
        ),
    ),
    (
        "fixed_assets_turnover",
        (
            "Fixed Assets Turnover",
            "Measures how efficiently fixed assets generate sales",
            "Net sales ÷ Property, plant and equipment",
        ),
        (
            "معدل دوران الأصول الثابتة",
            "يقيس كفاءة الشركة في استخدام الأصول الثابتة لتوليد المبيعات",
            "صافي المبيعات ÷ الأصول الثابتة",
        ),
    ),
    (
        "total_assets_turnover",
        (
            "Total Assets Turnover",
            "Measures how efficiently all assets generate sales",
            "Net sales ÷ Total assets",
        ),
        (
            "معدل دوران إجمالي الأصول",
            "يقيس كفاءة الشركة في استخدام جميع أصولها لتوليد المبيعات",
            "صافي المبيعات ÷ إجمالي الأصول",
        ),
    ),
    (
        "working_capital_turnover",
        (
            "Working Capital Turnover",
            "Measures how efficiently working capital generates sales",
            "Net sales ÷ Working capital",
        ),
        (
            "معدل دوران رأس المال العامل",
            "يقيس كفاءة الشركة في استخدام رأس المال العامل لتوليد المبيعات",
            "صافي المبيعات ÷ رأس المال العامل",
        ),
    ),
    (
        "net_assets_turnover",
        (
            "Net Assets Turnover",
            "Measures how efficiently net assets generate sales",
            "Net sales ÷ (Total assets - Current liabilities)",
        ),
        (
            "معدل دوران الأصول الصافية",
            "يقيس كفاءة الشركة في استخدام الأصول الصافية لتوليد المبيعات",
            "صافي المبيعات ÷ (إجمالي الأصول - الخصوم الجارية)",
        ),
    ),
    (
        "invested_capital_turnover",
        (
            "Invested Capital Turnover",
            "Measures how efficiently invested capital generates sales",
            "Net sales ÷ (Equity + Long-term debt)",
        ),
        (
            "معدل دوران رأس المال المستثمر",
            "يقيس كفاءة الشركة في استخدام رأس المال المستثمر لتوليد المبيعات",
            "صافي المبيعات ÷ (حقوق الملكية + الديون طويلة الأجل)",
        ),
    ),
    (
        "equity_turnover",
        (
            "Equity Turnover",
            "Measures how efficiently shareholders' equity generates sales",
            "Net sales ÷ Equity",
        ),
        (
            "معدل دوران حقوق الملكية",
            "يقيس كفاءة الشركة في استخدام حقوق الملكية لتوليد المبيعات",
            "صافي المبيعات ÷ حقوق الملكية",
        ),
    ),
    (
        "total_productivity",
        (
            "Total Productivity Ratio",
            "Measures how efficiently total costs are converted into revenue",
            "Revenue ÷ (Cost of goods sold + Operating expenses)",
        ),
        (
            "نسبة الإنتاجية الإجمالية",
            "يقيس كفاءة الشركة في تحويل التكاليف الإجمالية إلى إيرادات",
            "الإيرادات ÷ (تكلفة البضاعة المباعة + المصروفات التشغيلية)",
        ),
    ),
    # Profitability
    (
        "gross_profit_margin",
        (
            "Gross Profit Margin",
            "Measures the share of sales left as gross profit after the cost of goods sold",
            "(Gross profit ÷ Net sales) × 100",
        ),
        (
            "هامش الربح الإجمالي",
            "يقيس النسبة المئوية للربح الإجمالي من المبيعات بعد خصم تكلفة البضاعة المباعة",
            "(الربح الإجمالي ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "operating_margin",
        (
            "Operating Profit Margin",
            "Measures the share of sales left as operating profit",
            "(Operating income ÷ Net sales) × 100",
        ),
        (
            "هامش الربح التشغيلي",
            "يقيس النسبة المئوية للربح التشغيلي من المبيعات",
            "(الربح التشغيلي ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "net_profit_margin",
        (
            "Net Profit Margin",
            "Measures the share of sales left as net profit after all costs and taxes",
            "(Net income ÷ Net sales) × 100",
        ),
        (
            "هامش صافي الربح",
            "يقيس النسبة المئوية لصافي الربح من المبيعات بعد جميع التكاليف والضرائب",
            "(صافي الربح ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "ebitda_margin",
        (
            "EBITDA Margin",
            "Measures earnings before interest, taxes, depreciation and amortization as a share of sales",
            "(EBITDA ÷ Net sales) × 100",
        ),
        (
            "هامش EBITDA",
            "يقيس النسبة المئوية للأرباح قبل الفوائد والضرائب والإهلاك والاستهلاك من المبيعات",
            "(EBITDA ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "roa",
        (
            "Return on Assets (ROA)",
            "Measures how efficiently the company uses its assets to generate profit",
            "(Net income ÷ Total assets) × 100",
        ),
        (
            "العائد على الأصول",
            "يقيس كفاءة الشركة في استخدام أصولها لتوليد الأرباح",
            "(صافي الربح ÷ إجمالي الأصول) × 100",
        ),
    ),
    (
        "roe",
        (
            "Return on Equity (ROE)",
            "Measures the return earned on shareholders' investment",
            "(Net income ÷ Equity) × 100",
        ),
        (
            "العائد على حقوق الملكية",
            "يقيس العائد الذي تحققه الشركة على استثمارات المساهمين",
            "(صافي الربح ÷ حقوق الملكية) × 100",
        ),
    ),
    (
        "roic",
        (
            "Return on Invested Capital (ROIC)",
            "Measures the after-tax operating return on invested capital",
            "(Operating income × (1 - Tax rate) ÷ (Equity + Long-term debt)) × 100",
        ),
        (
            "العائد على رأس المال المستثمر",
            "يقيس كفاءة الشركة في استخدام رأس المال المستثمر لتوليد الأرباح",
            "(الربح التشغيلي بعد الضرائب ÷ رأس المال المستثمر) × 100",
        ),
    ),
    (
        "roce",
        (
            "Return on Capital Employed (ROCE)",
            "Measures the operating return on capital employed",
            "(Operating income ÷ (Total assets - Current liabilities)) × 100",
        ),
        (
            "العائد على رأس المال المستخدم",
            "يقيس كفاءة الشركة في استخدام رأس المال المستخدم لتوليد الأرباح التشغيلية",
            "(الربح التشغيلي ÷ رأس المال المستخدم) × 100",
        ),
    ),
    (
        "ros",
        (
            "Return on Sales (ROS)",
            "Measures the operating profit earned on each unit of sales",
            "(Operating income ÷ Net sales) × 100",
        ),
        (
            "العائد على المبيعات",
            "يقيس النسبة المئوية للربح التشغيلي من كل وحدة مبيعات",
            "(الربح التشغيلي ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "operating_cash_flow_margin",
        (
            "Operating Cash Flow Margin",
            "Measures operating cash flow as a share of sales",
            "(Cash flow from operations ÷ Net sales) × 100",
        ),
        (
            "هامش التدفق النقدي التشغيلي",
            "يقيس النسبة المئوية للتدفق النقدي التشغيلي من المبيعات",
            "(التدفق النقدي التشغيلي ÷ صافي المبيعات) × 100",
        ),
    ),
    (
        "eps",
        (
            "Earnings Per Share (EPS)",
            "Measures the net profit attributable to each share",
            "Net income ÷ Shares outstanding",
        ),
        (
            "ربحية السهم",
            "يقيس نصيب السهم الواحد من صافي الأرباح",
            "صافي الربح ÷ عدد الأسهم المصدرة",
        ),
    ),
    (
        "eps_growth",
        (
            "EPS Growth",
            "Measures the growth of earnings per share against the previous period",
            "((Current EPS - Previous EPS) ÷ |Previous EPS|) × 100",
        ),
        (
            "نمو ربحية السهم",
            "يقيس معدل نمو ربحية السهم مقارنة بالفترة السابقة",
            "((ربحية السهم الحالية - ربحية السهم السابقة) ÷ |ربحية السهم السابقة|) × 100",
        ),
    ),
    (
        "book_value_per_share",
        (
            "Book Value Per Share",
            "Measures the equity attributable to each share",
            "Total equity ÷ Shares outstanding",
        ),
        (
            "القيمة الدفترية للسهم",
            "يقيس نصيب السهم الواحد من حقوق الملكية",
            "إجمالي حقوق الملكية ÷ عدد الأسهم المصدرة",
        ),
    ),
    (
        "break_even_point",
        (
            "Break-Even Point",
            "Determines the sales level needed to cover all costs",
            "Fixed costs ÷ (1 - Variable cost ratio)",
        ),
        (
            "نقطة التعادل",
            "يحدد مستوى المبيعات المطلوب لتغطية جميع التكاليف",
            "التكاليف الثابتة ÷ (1 - نسبة التكاليف المتغيرة)",
        ),
    ),
    (
        "margin_of_safety",
        (
            "Margin of Safety",
            "Measures how far sales can fall before reaching the break-even point",
            "((Actual sales - Break-even sales) ÷ Actual sales) × 100",
        ),
        (
            "هامش الأمان",
            "يقيس النسبة المئوية التي يمكن أن تنخفض بها المبيعات قبل الوصول لنقطة التعادل",
            "((المبيعات الفعلية - نقطة التعادل) ÷ المبيعات الفعلية) × 100",
        ),
    ),
    (
        "contribution_margin",
        (
            "Contribution Margin",
            "Measures the share of sales available to cover fixed costs and profit",
            "((Sales - Variable costs) ÷ Sales) × 100",
        ),
        (
            "هامش المساهمة",
            "يقيس النسبة المئوية من المبيعات المتاحة لتغطية التكاليف الثابتة والأرباح",
            "((المبيعات - التكاليف المتغيرة) ÷ المبيعات) × 100",
        ),
    ),
    (
        "rona",
        (
            "Return on Net Assets (RONA)",
            "Measures how efficiently net assets generate profit",
            "(Net income ÷ (Total assets - Current liabilities)) × 100",
        ),
        (
            "العائد على الأصول الصافية",
            "يقيس كفاءة الشركة في استخدام الأصول الصافية لتوليد الأرباح",
            "(صافي الربح ÷ الأصول الصافية) × 100",
        ),
    ),
    (
        "sustainable_growth_rate",
        (
            "Sustainable Growth Rate",
            "Measures the maximum growth achievable without issuing new equity",
            "ROE × (1 - Payout ratio)",
        ),
        (
            "معدل النمو المستدام",
            "يقيس أقصى معدل نمو يمكن للشركة تحقيقه دون إصدار أسهم جديدة",
            "العائد على حقوق الملكية × (1 - نسبة التوزيع)",
        ),
    ),
    (
        "profitability_index",
        (
            "Profitability Index (PI)",
            "Measures operating cash generated per unit of investment outlay",
            "(Operating cash flow + Investing cash flow) ÷ |Investing cash flow|",
        ),
        (
            "مؤشر الربحية",
            "يقيس القيمة الحالية للتدفقات النقدية المستقبلية نسبة إلى الاستثمار الأولي",
            "(التدفق النقدي التشغيلي + التدفق النقدي الاستثماري) ÷ |التدفق النقدي الاستثماري|",
        ),
    ),
    (
        "payback_period",
        (
            "Payback Period",
            "Measures the years needed to recover the period's investment from operating cash flow",
            "|Investing cash flow| ÷ Operating cash flow",
        ),
        (
            "فترة الاسترداد",
            "يقيس الوقت المطلوب لاسترداد الاستثمار الأولي من التدفقات النقدية",
            "|التدفق النقدي الاستثماري| ÷ التدفق النقدي التشغيلي",
        ),
    ),
    # Leverage
    (
        "debt_to_assets",
        (
            "Debt to Total Assets",
            "Measures the share of assets financed by liabilities",
            "(Total liabilities ÷ Total assets) × 100",
        ),
        (
            "نسبة الدين إلى إجمالي الأصول",
            "تقيس النسبة المئوية للأصول الممولة بالديون",
            "(إجمالي الخصوم ÷ إجمالي الأصول) × 100",
        ),
    ),
    (
        "debt_to_equity",
        (
            "Debt to Equity (D/E)",
            "Measures liabilities relative to equity in the capital structure",
            "Total liabilities ÷ Total equity",
        ),
        (
            "نسبة الدين إلى حقوق الملكية",
            "تقيس نسبة الديون إلى حقوق الملكية في هيكل رأس المال",
            "إجمالي الخصوم ÷ إجمالي حقوق الملكية",
        ),
    ),
    (
        "debt_to_ebitda",
        (
            "Debt to EBITDA",
            "Measures how many years of operating earnings would repay liabilities",
            "Total liabilities ÷ EBITDA",
        ),
        (
            "نسبة الدين إلى EBITDA",
            "تقيس قدرة الشركة على سداد ديونها من الأرباح التشغيلية",
            "إجمالي الخصوم ÷ EBITDA",
        ),
    ),
    (
        "times_interest_earned",
        (
            "Times Interest Earned",
            "Measures how many times operating earnings cover interest expense",
            "EBIT ÷ Interest expense",
        ),
        (
            "نسبة تغطية الفوائد",
            "تقيس قدرة الشركة على تغطية مصروفات الفوائد من الأرباح التشغيلية",
            "الأرباح قبل الفوائد والضرائب ÷ مصروفات الفوائد",
        ),
    ),
    (
        "debt_service_coverage",
        (
            "Debt Service Coverage Ratio (DSCR)",
            "Measures whether operating cash flow covers interest and principal repayments",
            "Operating cash flow ÷ (Interest expense + Debt repayment)",
        ),
        (
            "نسبة تغطية خدمة الدين",
            "تقيس قدرة الشركة على تغطية خدمة الدين من التدفقات النقدية التشغيلية",
            "التدفق النقدي التشغيلي ÷ (الفوائد + أقساط الدين)",
        ),
    ),
    (
        "degree_operating_leverage",
        (
            "Degree of Operating Leverage (DOL)",
            "Measures the sensitivity of operating income to changes in sales",
            "Contribution margin ÷ Operating income",
        ),
        (
            "درجة الرافعة التشغيلية",
            "تقيس حساسية الأرباح التشغيلية للتغيرات في المبيعات",
            "هامش المساهمة ÷ الربح التشغيلي",
        ),
    ),
    (
        "degree_financial_leverage",
        (
            "Degree of Financial Leverage (DFL)",
            "Measures the sensitivity of shareholder earnings to changes in operating income",
            "EBIT ÷ Earnings before tax",
        ),
        (
            "درجة الرافعة المالية",
            "تقيس حساسية الأرباح لحملة الأسهم للتغيرات في الأرباح التشغيلية",
            "الأرباح قبل الفوائد والضرائب ÷ الأرباح قبل الضرائب",
        ),
    ),
    (
        "degree_combined_leverage",
        (
            "Degree of Combined Leverage (DCL)",
            "Measures the joint effect of operating and financial leverage on shareholder earnings",
            "DOL × DFL",
        ),
        (
            "درجة الرافعة المدمجة",
            "تقيس التأثير المدمج للرافعة التشغيلية والمالية على أرباح الأسهم",
            "درجة الرافعة التشغيلية × درجة الرافعة المالية",
        ),
    ),
    (
        "equity_to_assets",
        (
            "Equity to Assets",
            "Measures the share of assets financed by equity",
            "(Equity ÷ Total assets) × 100",
        ),
        (
            "نسبة حقوق الملكية إلى الأصول",
            "تقيس النسبة المئوية للأصول الممولة بحقوق الملكية",
            "(حقوق الملكية ÷ إجمالي الأصول) × 100",
        ),
    ),
    (
        "long_term_debt_ratio",
        (
            "Long-term Debt Ratio",
            "Measures the share of assets financed by long-term debt",
            "(Long-term debt ÷ Total assets) × 100",
        ),
        (
            "نسبة الدين طويل الأجل",
            "تقيس النسبة المئوية للأصول الممولة بالديون طويلة الأجل",
            "(الديون طويلة الأجل ÷ إجمالي الأصول) × 100",
        ),
    ),
    (
        "short_term_debt_ratio",
        (
            "Short-term Debt Ratio",
            "Measures the share of assets financed by short-term debt",
            "(Short-term debt ÷ Total assets) × 100",
        ),
        (
            "نسبة الدين قصير الأجل",
            "تقيس النسبة المئوية للأصول الممولة بالديون قصيرة الأجل",
            "(الديون قصيرة الأجل ÷ إجمالي الأصول) × 100",
        ),
    ),
    (
        "equity_multiplier",
        (
            "Equity Multiplier",
            "Measures how far the company relies on debt to finance its assets",
            "Total assets ÷ Equity",
        ),
        (
            "مضاعف حقوق الملكية",
            "يقيس مدى اعتماد الشركة على الديون في تمويل أصولها",
            "إجمالي الأصول ÷ حقوق الملكية",
        ),
    ),
    (
        "self_financing_ratio",
        (
            "Self-financing Ratio",
            "Measures the share of equity built from retained earnings",
            "(Retained earnings ÷ Equity) × 100",
        ),
        (
            "نسبة التمويل الذاتي",
            "تقيس نسبة الأرباح المحتجزة من إجمالي حقوق الملكية",
            "(الأرباح المحتجزة ÷ حقوق الملكية) × 100",
        ),
    ),
    (
        "financial_independence",
        (
            "Financial Independence Ratio",
            "Measures the company's independence from external creditors",
            "(Equity ÷ Total liabilities) × 100",
        ),
        (
            "نسبة الاستقلال المالي",
            "تقيس درجة الاستقلال المالي للشركة عن الديون الخارجية",
            "(حقوق الملكية ÷ إجمالي الخصوم) × 100",
        ),
    ),
    (
        "net_debt_ratio",
        (
            "Net Debt Ratio",
            "Measures liabilities net of cash and short-term investments as a share of assets",
            "((Total liabilities - Cash - Short-term investments) ÷ Total assets) × 100",
        ),
        (
            "نسبة صافي الدين",
            "تقيس النسبة المئوية لصافي الدين (الديون ناقص النقد) من إجمالي الأصول",
            "((إجمالي الخصوم - النقد - الاستثمارات قصيرة الأجل) ÷ إجمالي الأصول) × 100",
        ),
    ),
    # Market
    (
        "pe_ratio",
        (
            "Price to Earnings (P/E)",
            "Measures what investors pay for each unit of the company's earnings",
            "Share price ÷ EPS",
        ),
        (
            "نسبة السعر إلى الأرباح",
            "تقيس استعداد المستثمرين لدفع مقابل كل ريال من أرباح الشركة",
            "سعر السهم ÷ ربحية السهم",
        ),
    ),
    (
        "pb_ratio",
        (
            "Price to Book (P/B)",
            "Measures the share price relative to book value per share",
            "Share price ÷ Book value per share",
        ),
        (
            "نسبة السعر إلى القيمة الدفترية",
            "تقيس القيمة السوقية للسهم نسبة إلى قيمته الدفترية",
            "سعر السهم ÷ القيمة الدفترية للسهم",
        ),
    ),
    (
        "ps_ratio",
        (
            "Price to Sales (P/S)",
            "Measures the share price relative to sales per share",
            "Share price ÷ (Revenue ÷ Shares outstanding)",
        ),
        (
            "نسبة السعر إلى المبيعات",
            "تقيس القيمة السوقية للسهم نسبة إلى مبيعات السهم الواحد",
            "سعر السهم ÷ (المبيعات ÷ عدد الأسهم)",
        ),
    ),
    (
        "ev_ebitda",
        (
            "Enterprise Value to EBITDA",
            "Measures enterprise value relative to operating earnings before depreciation",
            "(Market cap + Total debt - Cash) ÷ EBITDA",
        ),
        (
            "قيمة المنشأة إلى EBITDA",
            "تقيس قيمة المنشأة نسبة إلى الأرباح التشغيلية قبل الفوائد والضرائب والإهلاك",
            "قيمة المنشأة ÷ EBITDA",
        ),
    ),
    (
        "ev_sales",
        (
            "Enterprise Value to Sales",
            "Measures enterprise value relative to total sales",
            "(Market cap + Total debt - Cash) ÷ Revenue",
        ),
        (
            "قيمة المنشأة إلى المبيعات",
            "تقيس قيمة المنشأة نسبة إلى إجمالي المبيعات",
            "قيمة المنشأة ÷ إجمالي المبيعات",
        ),
    ),
    (
        "dividend_yield",
        (
            "Dividend Yield",
            "Measures the annual dividend return relative to the share price",
            "(Dividend per share ÷ Share price) × 100",
        ),
        (
            "عائد التوزيعات",
            "يقيس العائد السنوي من التوزيعات نسبة إلى سعر السهم",
            "(توزيعات السهم ÷ سعر السهم) × 100",
        ),
    ),
    (
        "payout_ratio",
        (
            "Payout Ratio",
            "Measures the share of earnings paid out as dividends",
            "(Dividend per share ÷ EPS) × 100",
        ),
        (
            "نسبة التوزيع",
            "تقيس النسبة المئوية من الأرباح الموزعة كأرباح للمساهمين",
            "(توزيعات السهم ÷ ربحية السهم) × 100",
        ),
    ),
    (
        "peg_ratio",
        (
            "Price/Earnings to Growth (PEG)",
            "Relates the P/E ratio to the growth rate of earnings",
            "P/E ÷ EPS growth (%)",
        ),
        (
            "نسبة PEG",
            "تقيس نسبة السعر إلى الأرباح مقسومة على معدل نمو الأرباح",
            "نسبة السعر إلى الأرباح ÷ معدل نمو الأرباح",
        ),
    ),
    (
        "earnings_yield",
        (
            "Earnings Yield",
            "Measures earnings per share relative to the share price (the inverse of P/E)",
            "(EPS ÷ Share price) × 100",
        ),
        (
            "عائد الأرباح",
            "يقيس ربحية السهم نسبة إلى سعر السهم (عكس نسبة P/E)",
            "(ربحية السهم ÷ سعر السهم) × 100",
        ),
    ),
    (
        "tobins_q",
        (
            "Tobin's Q Ratio",
            "Measures the market value of the company relative to the book value of its assets",
            "Market capitalization ÷ Total assets",
        ),
        (
            "نسبة Q (Tobin's Q)",
            "تقيس القيمة السوقية للشركة نسبة إلى التكلفة الاستبدالية لأصولها",
            "القيمة السوقية ÷ القيمة الدفترية للأصول",
        ),
    ),
    (
        "price_to_cash_flow",
        (
            "Price to Cash Flow",
            "Measures the share price relative to operating cash flow per share",
            "Share price ÷ (Operating cash flow ÷ Shares outstanding)",
        ),
        (
            "نسبة السعر إلى التدفق النقدي",
            "تقيس سعر السهم نسبة إلى التدفق النقدي التشغيلي للسهم الواحد",
            "سعر السهم ÷ (التدفق النقدي التشغيلي ÷ عدد الأسهم)",
        ),
    ),
    (
        "retention_ratio",
        (
            "Retention Ratio",
            "Measures the share of earnings retained for reinvestment",
            "100 - Payout ratio",
        ),
        (
            "معدل الاحتفاظ بالأرباح",
            "يقيس النسبة المئوية من الأرباح المحتفظ بها في الشركة لإعادة الاستثمار",
            "100 - نسبة التوزيع",
        ),
    ),
    (
        "market_to_book",
        (
            "Market to Book",
            "Measures the market value of equity relative to its book value",
            "Market capitalization ÷ Book equity",
        ),
        (
            "القيمة السوقية إلى القيمة الدفترية",
            "تقيس القيمة السوقية لحقوق الملكية نسبة إلى قيمتها الدفترية",
            "القيمة السوقية لحقوق الملكية ÷ القيمة الدفترية لحقوق الملكية",
        ),
    ),
    (
        "cash_coverage_dividends",
        (
            "Cash Coverage of Dividends",
            "Measures how many times operating cash flow covers dividends paid",
            "Operating cash flow ÷ (Dividend per share × Shares outstanding)",
        ),
        (
            "نسبة التغطية النقدية للتوزيعات",
            "تقيس قدرة التدفق النقدي التشغيلي على تغطية توزيعات الأرباح",
            "التدفق النقدي التشغيلي ÷ إجمالي التوزيعات",
        ),
    ),
    (
        "dividend_growth_rate",
        (
            "Dividend Growth Rate",
            "Measures the growth of dividends per share against the previous period",
            "((Current DPS - Previous DPS) ÷ |Previous DPS|) × 100",
        ),
        (
            "معدل نمو التوزيعات",
            "يقيس معدل نمو توزيعات الأرباح مقارنة بالفترة السابقة",
            "((التوزيعات الحالية - التوزيعات السابقة) ÷ |التوزيعات السابقة|) × 100",
        ),
    ),
    # Cash flow and movement
    (
        "basic_cash_flow",
        (
            "Basic Cash Flow Analysis",
            "Analyses the cash generated by operating activities",
            "Net cash from operations (benchmarked as a share of revenue)",
        ),
        (
            "تحليل التدفقات النقدية الأساسي",
            "يحلل مصادر واستخدامات النقد في الأنشطة التشغيلية والاستثمارية والتمويلية",
            "صافي النقد من الأنشطة التشغيلية (مقارنة كنسبة من الإيرادات)",
        ),
    ),
    (
        "working_capital_analysis",
        (
            "Working Capital Analysis",
            "Analyses the level of working capital and its effect on liquidity",
            "Current assets - Current liabilities (benchmarked as a share of total assets)",
        ),
        (
            "تحليل رأس المال العامل",
            "يحلل التغيرات في رأس المال العامل وتأثيرها على السيولة والتدفق النقدي",
            "الأصول الجارية - الخصوم الجارية (مقارنة كنسبة من إجمالي الأصول)",
        ),
    ),
    (
        "free_cash_flow",
        (
            "Free Cash Flow Analysis",
            "Analyses the cash left after the capital spending needed to sustain and grow the business",
            "Operating cash flow - Capital expenditures",
        ),
        (
            "تحليل التدفقات الحرة",
            "يحلل النقد المتاح للشركة بعد الاستثمارات الضرورية لصيانة ونمو الأعمال",
            "التدفق النقدي التشغيلي - النفقات الرأسمالية",
        ),
    ),
    (
        "earnings_quality",
        (
            "Earnings Quality Analysis",
            "Measures how far accounting earnings turn into actual cash flow",
            "Operating cash flow ÷ Net income",
        ),
        (
            "تحليل جودة الأرباح",
            "يقيس مدى تحول الأرباح المحاسبية إلى تدفقات نقدية فعلية",
            "التدفق النقدي التشغيلي ÷ صافي الربح",
        ),
    ),
    (
        "accruals_index",
        (
            "Accruals Index",
            "Measures accruals (the gap between earnings and cash flow) relative to assets",
            "(Net income - Operating cash flow) ÷ Total assets",
        ),
        (
            "مؤشر الاستحقاقات",
            "يقيس نسبة الاستحقاقات (الفرق بين الأرباح والتدفق النقدي) إلى الأصول",
            "(صافي الربح - التدفق النقدي التشغيلي) ÷ إجمالي الأصول",
        ),
    ),
    (
        "fixed_costs_structure",
        (
            "Fixed Costs Structure Analysis",
            "Analyses the weight of fixed costs and its effect on earnings flexibility",
            "(Operating expenses + 30% of COGS) ÷ Revenue × 100",
        ),
        (
            "تحليل هيكل التكاليف الثابتة",
            "يحلل نسبة التكاليف الثابتة وتأثيرها على مرونة الأرباح",
            "(المصروفات التشغيلية + 30% من تكلفة المبيعات) ÷ الإيرادات × 100",
        ),
    ),
    (
        "variable_costs_structure",
        (
            "Variable Costs Structure Analysis",
            "Analyses the weight of variable costs and their link to sales volume",
            "70% of COGS ÷ Revenue × 100",
        ),
        (
            "تحليل هيكل التكاليف المتغيرة",
            "يحلل نسبة التكاليف المتغيرة وعلاقتها بحجم الإنتاج والمبيعات",
            "70% من تكلفة المبيعات ÷ الإيرادات × 100",
        ),
    ),
    (
        "dupont_three_factor",
        (
            "DuPont Three-Factor Analysis",
            "Breaks return on equity into profitability, efficiency and leverage",
            "Net margin × Asset turnover × Equity multiplier × 100",
        ),
        (
            "تحليل دوبونت الثلاثي",
            "يحلل العائد على حقوق الملكية من خلال ثلاثة عوامل: الربحية، الكفاءة، والرافعة المالية",
            "هامش صافي الربح × دوران الأصول × مضاعف حقوق الملكية × 100",
        ),
    ),
    (
        "dupont_five_factor",
        (
            "DuPont Five-Factor Analysis",
            "Breaks return on equity into five detailed performance drivers",
            "Tax burden × Interest burden × EBIT margin × Asset turnover × Equity multiplier × 100",
        ),
        (
            "تحليل دوبونت الخماسي",
            "يحلل العائد على حقوق الملكية من خلال خمسة عوامل تفصيلية للأداء المالي",
            "العبء الضريبي × عبء الفوائد × هامش EBIT × دوران الأصول × مضاعف حقوق الملكية × 100",
        ),
    ),
    (
        "economic_value_added",
        (
            "Economic Value Added (EVA)",
            "Measures the economic profit left after charging for the cost of capital",
            "NOPAT - Cost of capital × (Equity + Long-term debt)",
        ),
        (
            "القيمة المضافة الاقتصادية",
            "يقيس القيمة الاقتصادية الحقيقية المضافة بعد خصم تكلفة رأس المال",
            "صافي الربح التشغيلي بعد الضرائب - تكلفة رأس المال × (حقوق الملكية + الديون طويلة الأجل)",
        ),
    ),
    (
        "market_value_added",
        (
            "Market Value Added (MVA)",
            "Measures the gap between the market value and the book equity invested by shareholders",
            "Market capitalization - Book equity",
        ),
        (
            "القيمة السوقية المضافة",
            "يقيس الفرق بين القيمة السوقية وراس المال المستثمر من قبل المساهمين",
            "القيمة السوقية - القيمة الدفترية لحقوق الملكية",
        ),
    ),
    (
        "cash_cycle_analysis",
        (
            "Cash Cycle Analysis",
            "Analyses the time needed to convert inventory investment back into cash",
            "Days in inventory + Days in receivables - Days in payables",
        ),
        (
            "تحليل دورة النقد",
            "يحلل الوقت المطلوب لتحويل الاستثمارات في المخزون إلى نقد",
            "فترة المخزون + فترة التحصيل - فترة السداد",
        ),
    ),
    (
        "break_even_analysis",
        (
            "Break-even Analysis",
            "Determines the sales level needed to cover fixed and variable costs",
            "Fixed costs ÷ (1 - Variable costs ÷ Revenue)",
        ),
        (
            "تحليل نقطة التعادل",
            "يحدد مستوى المبيعات المطلوب لتغطية جميع التكاليف الثابتة والمتغيرة",
            "التكاليف الثابتة ÷ (1 - التكاليف المتغيرة ÷ الإيرادات)",
        ),
    ),
    (
        "margin_of_safety_analysis",
        (
            "Margin of Safety Analysis",
            "Analyses how much sales can fall before the break-even point is reached",
            "((Revenue - Break-even sales) ÷ Revenue) × 100",
        ),
        (
            "تحليل هامش الأمان",
            "يحلل مدى قدرة الشركة على تحمل انخفاض المبيعات قبل الوصول لنقطة التعادل",
            "((الإيرادات - مبيعات التعادل) ÷ الإيرادات) × 100",
        ),
    ),
    (
        "operating_leverage_analysis",
        (
            "Operating Leverage Analysis",
            "Analyses the sensitivity of operating income to changes in sales volume",
            "Contribution margin ÷ Operating income",
        ),
        (
            "تحليل الرافعة التشغيلية",
            "يحلل حساسية الأرباح التشغيلية للتغيرات في حجم المبيعات",
            "هامش المساهمة ÷ الربح التشغيلي",
        ),
    ),
    (
        "contribution_margin_analysis",
        (
            "Contribution Margin Analysis",
            "Analyses the share of sales available to cover fixed costs and profit",
            "((Revenue - Variable costs) ÷ Revenue) × 100",
        ),
        (
            "تحليل هامش المساهمة",
            "يحلل النسبة المئوية من المبيعات المتاحة لتغطية التكاليف الثابتة والأرباح",
            "((الإيرادات - التكاليف المتغيرة) ÷ الإيرادات) × 100",
        ),
    ),
    (
        "free_cash_flow_firm",
        (
            "Free Cash Flow to Firm (FCFF)",
            "Analyses the cash available to all capital providers, debt and equity",
            "NOPAT + Depreciation - Capital expenditures - Working capital changes",
        ),
        (
            "تحليل التدفق النقدي الحر للشركة",
            "يحلل التدفق النقدي المتاح لجميع مقدمي رأس المال (الدين وحقوق الملكية)",
            "صافي الربح التشغيلي بعد الضرائب + الإهلاك - النفقات الرأسمالية - التغير في رأس المال العامل",
        ),
    ),
    (
        "free_cash_flow_equity",
        (
            "Free Cash Flow to Equity (FCFE)",
            "Analyses the cash available only to shareholders after debt obligations",
            "FCFF - Interest × (1 - Tax rate) + Debt issued - Debt repaid",
        ),
        (
            "تحليل التدفق النقدي لحقوق الملكية",
            "يحلل التدفق النقدي المتاح حصراً لحملة الأسهم بعد سداد التزامات الدين",
            "التدفق الحر للشركة - الفوائد × (1 - معدل الضريبة) + الديون المصدرة - الديون المسددة",
        ),
    ),
]


# ----------------------------
# Tier 2: intermediate
# ----------------------------

INTERMEDIATE_TEXT: List[_Row] = [
    (
        "sector_comparison",
        (
            "Industry Sector Comparison",
            "Compares the company's key ratios with the sector reference profile",
            "Mean of (Gross margin, Net margin, ROE, ROA) ÷ sector reference × 100",
        ),
        (
            "تحليل المقارنة القطاعية",
            "مقارنة أداء الشركة مع متوسط الصناعة والقطاع",
            "متوسط (هامش الربح الإجمالي، هامش صافي الربح، العائد على حقوق الملكية، العائد على الأصول) ÷ مرجع القطاع × 100",
        ),
    ),
    (
        "historical_comparison",
        (
            "Historical Performance Comparison",
            "Compares current return on equity with the previous period",
            "Current ROE ÷ Previous ROE × 100",
        ),
        (
            "مقارنة الأداء التاريخي",
            "تحليل الاتجاهات والتطور التاريخي لأداء الشركة",
            "العائد الحالي على حقوق الملكية ÷ العائد السابق × 100",
        ),
    ),
    (
        "competitive_analysis",
        (
            "Competitive Analysis",
            "Assesses the competitive position against a typical competitor profile",
            "Mean of (Current ratio, Asset turnover, Operating margin) ÷ competitor reference × 100",
        ),
        (
            "مقارنة المنافسين",
            "تحليل الموقف التنافسي للشركة مقابل المنافسين الرئيسيين",
            "متوسط (النسبة الجارية، دوران الأصول، هامش الربح التشغيلي) ÷ مرجع المنافسين × 100",
        ),
    ),
    (
        "dcf_valuation",
        (
            "DCF Valuation",
            "Values the firm from its discounted future free cash flows",
            "Five-year FCFF projection discounted at the cost of capital plus a Gordon terminal value",
        ),
        (
            "تقييم التدفق النقدي المخصوم",
            "تقييم الشركة بناءً على التدفقات النقدية المستقبلية المخصومة",
            "إسقاط التدفق النقدي الحر لخمس سنوات مخصوماً بتكلفة رأس المال مع قيمة نهائية بنموذج جوردن",
        ),
    ),
    (
        "gordon_growth",
        (
            "Gordon Growth Model",
            "Values the share from a growing dividend stream",
            "DPS × (1 + g) ÷ (Required return - g)",
        ),
        (
            "نموذج جوردن للنمو",
            "تقييم الشركة بناءً على توزيعات الأرباح المتنامية",
            "القيمة = التوزيعات المتوقعة ÷ (معدل العائد المطلوب - معدل النمو)",
        ),
    ),
    (
        "multiples_valuation",
        (
            "Multiple Valuation",
            "Values the share by applying a market earnings multiple",
            "EPS × Market P/E multiple",
        ),
        (
            "تقييم المضاعفات",
            "تقييم الشركة بناءً على مضاعفات السوق والمقارنات",
            "ربحية السهم × مضاعف الربحية السوقي",
        ),
    ),
    (
        "eva",
        (
            "Economic Value Added",
            "Measures the true profit left after the cost of capital employed",
            "NOPAT - Cost of capital × Capital employed",
        ),
        (
            "القيمة الاقتصادية المضافة",
            "قياس الربح الحقيقي بعد تكلفة رأس المال",
            "NOPAT - (المال المستثمر × تكلفة رأس المال)",
        ),
    ),
    (
        "mva",
        (
            "Market Value Added",
            "Measures the gap between the market value of capital and the capital employed",
            "Market cap + Total debt - Capital employed",
        ),
        (
            "القيمة السوقية المضافة",
            "الفرق بين القيمة السوقية والقيمة الدفترية",
            "القيمة السوقية + إجمالي الديون - رأس المال المستخدم",
        ),
    ),
    (
        "fair_value",
        (
            "Fair Value Analysis",
            "Estimates the fair value per share from several fundamental methods",
            "Mean of positive DCF, multiples and Gordon per-share values",
        ),
        (
            "تحليل القيمة العادلة",
            "تقدير القيمة العادلة للسهم بناءً على التحليل الأساسي",
            "متوسط القيم الموجبة للسهم من التدفق المخصوم والمضاعفات ونموذج جوردن",
        ),
    ),
    (
        "valuation_sensitivity",
        (
            "Valuation Sensitivity Analysis",
            "Measures how strongly the DCF value reacts to the discount rate",
            "|EV(WACC - 1pp) - EV(WACC + 1pp)| ÷ |EV(WACC)| × 100",
        ),
        (
            "تحليل الحساسية للتقييم",
            "تحليل تأثير تغيير المتغيرات على التقييم",
            "|قيمة المنشأة عند خصم أقل بنقطة - عند خصم أعلى بنقطة| ÷ |قيمة المنشأة الأساسية| × 100",
        ),
    ),
    (
        "risk_adjusted_return",
        (
            "Risk-Adjusted Return",
            "Measures return on assets in excess of the risk-free rate per unit of return volatility",
            "(ROA - Risk-free rate) ÷ Volatility of ROA",
        ),
        (
            "عائد الاستثمار المعدل حسب المخاطر",
            "قياس العائد مع الأخذ في الاعتبار مستوى المخاطر",
            "(العائد على الأصول - العائد الخالي من المخاطر) ÷ تقلب العائد على الأصول",
        ),
    ),
    (
        "sharpe_ratio",
        (
            "Sharpe Ratio",
            "Measures excess return per unit of total risk",
            "(ROE - Risk-free rate) ÷ Equity volatility",
        ),
        (
            "نسبة شارب",
            "قياس العائد الإضافي لكل وحدة مخاطر",
            "(العائد - العائد الخالي من المخاطر) ÷ الانحراف المعياري",
        ),
    ),
    (
        "treynor_ratio",
        (
            "Treynor Ratio",
            "Measures excess return per unit of systematic risk",
            "(ROE - Risk-free rate) ÷ Beta",
        ),
        (
            "نسبة تريينور",
            "قياس العائد الإضافي لكل وحدة مخاطر منتظمة",
            "(العائد - العائد الخالي من المخاطر) ÷ بيتا",
        ),
    ),
    (
        "risk_return_analysis",
        (
            "Risk-Return Analysis",
            "Relates return on assets to the balance-sheet risk taken to earn it",
            "ROA ÷ (Total liabilities ÷ Total assets)",
        ),
        (
            "تحليل المخاطر والعائد",
            "تحليل العلاقة بين المخاطر والعائد المتوقع",
            "العائد على الأصول ÷ (إجمالي الخصوم ÷ إجمالي الأصول)",
        ),
    ),
    (
        "financial_break_even",
        (
            "Financial Break-Even Analysis",
            "Measures how much of operating profit is absorbed by financing costs",
            "Interest expense ÷ EBIT × 100",
        ),
        (
            "تحليل نقطة التعادل المالي",
            "تحديد نقطة التعادل المالي مع تكلفة التمويل",
            "مصروفات الفوائد ÷ الأرباح قبل الفوائد والضرائب × 100",
        ),
    ),
    (
        "relative_valuation",
        (
            "Relative Valuation",
            "Values the company against the reference market multiple",
            "Reference P/E (15) ÷ Company P/E × 100",
        ),
        (
            "تحليل التقييم النسبي",
            "تقييم الشركة نسبة إلى الشركات المماثلة في السوق",
            "مضاعف الربحية المرجعي (15) ÷ مضاعف ربحية الشركة × 100",
        ),
    ),
    (
        "operating_efficiency",
        (
            "Operating Efficiency Analysis",
            "Measures the operating profit earned on total operating costs",
            "Operating income ÷ (COGS + Operating expenses) × 100",
        ),
        (
            "تحليل كفاءة التشغيل",
            "قياس كفاءة العمليات التشغيلية للشركة",
            "الربح التشغيلي ÷ (تكلفة المبيعات + المصروفات التشغيلية) × 100",
        ),
    ),
    (
        "overall_performance",
        (
            "Overall Performance Index",
            "Composite index of the company's overall performance",
            "Mean of (Gross margin, Operating margin, ROE, ROA, Current ratio) ÷ reference × 100",
        ),
        (
            "مؤشر الأداء الإجمالي",
            "مؤشر مركب لقياس الأداء الإجمالي للشركة",
            "متوسط نسب (الهوامش، العوائد، النسبة الجارية) إلى مراجعها × 100",
        ),
    ),
    (
        "productivity_analysis",
        (
            "Productivity Analysis",
            "Measures the gross profit produced by each unit of operating spending",
            "Gross profit ÷ Operating expenses",
        ),
        (
            "تحليل الإنتاجية",
            "قياس إنتاجية الموارد والأصول",
            "الربح الإجمالي ÷ المصروفات التشغيلية",
        ),
    ),
    (
        "capital_efficiency",
        (
            "Capital Management Efficiency",
            "Measures the after-tax operating return on invested capital",
            "NOPAT ÷ (Equity + Total debt) × 100",
        ),
        (
            "كفاءة إدارة رأس المال",
            "قياس كفاءة استخدام رأس المال",
            "صافي الربح التشغيلي بعد الضرائب ÷ (حقوق الملكية + إجمالي الديون) × 100",
        ),
    ),
    (
        "management_quality",
        (
            "Management Quality Analysis",
            "Assesses management quality from returns and margins",
            "Mean of ROE, ROCE and Gross margin (%)",
        ),
        (
            "تحليل الجودة الإدارية",
            "تقييم جودة الإدارة بناءً على المؤشرات المالية",
            "متوسط العائد على حقوق الملكية والعائد على رأس المال المستخدم وهامش الربح الإجمالي",
        ),
    ),
]


# ----------------------------
# Tier 3: advanced
# ----------------------------

ADVANCED_TEXT: List[_Row] = [
    (
        "monte_carlo",
        (
            "Monte Carlo Simulation",
            "Probabilistic simulation of next-period revenue scenarios",
            "Share of seeded normal revenue-growth draws that do not fall, from historical mean and volatility",
        ),
        (
            "نموذج مونت كارلو للمحاكاة",
            "محاكاة احتمالية للسيناريوهات المالية المختلفة",
            "نسبة مسارات نمو الإيرادات المحاكاة التي لا تنخفض وفق المتوسط والتقلب التاريخيين",
        ),
    ),
    (
        "regression_model",
        (
            "Multiple Regression Modeling",
            "Statistical model of the relationship between earnings and their drivers",
            "R² of Net income = β₀ + β₁ Revenue + β₂ Operating expenses + ε",
        ),
        (
            "نمذجة الانحدار المتعدد",
            "نموذج إحصائي لتحليل العلاقات بين المتغيرات المالية",
            "معامل التحديد R² لانحدار صافي الربح على الإيرادات والمصروفات التشغيلية",
        ),
    ),
    (
        "garch_model",
        (
            "GARCH Volatility Model",
            "Models and forecasts the volatility of revenue growth",
            "Exponentially weighted volatility of revenue growth (decay 0.94)",
        ),
        (
            "نموذج التقلبات GARCH",
            "نمذجة التقلبات المالية والتنبؤ بها",
            "التقلب المرجح أسياً لنمو الإيرادات (معامل اضمحلال 0.94)",
        ),
    ),
    (
        "var_model",
        (
            "Value at Risk Modeling",
            "Estimates the largest likely fall in operating cash flow at a given confidence level",
            "Historical 95% VaR of operating cash flow changes ÷ |Current operating cash flow| × 100",
        ),
        (
            "نمذجة القيمة المعرضة للخطر",
            "تقدير أقصى خسارة محتملة عند مستوى ثقة معين",
            "القيمة المعرضة للخطر التاريخية عند 95% لتغيرات التدفق النقدي التشغيلي ÷ التدفق الحالي × 100",
        ),
    ),
    (
        "black_scholes",
        (
            "Black-Scholes Option Model",
            "Treats equity as a call option on the firm's assets to measure distance to default",
            "Merton distance to default: (ln(A ÷ D) + (r - σ² ÷ 2)T) ÷ (σ√T)",
        ),
        (
            "نموذج بلاك شولز للخيارات",
            "تسعير الخيارات المالية باستخدام نموذج بلاك شولز",
            "مسافة التعثر وفق نموذج ميرتون بمعاملة حقوق الملكية كخيار على أصول الشركة",
        ),
    ),
    (
        "scenario_model",
        (
            "Scenario Modeling",
            "Tests operating income under a range of revenue scenarios",
            "Share of revenue shocks (-30% to +20%) that keep operating income positive",
        ),
        (
            "نمذجة السيناريوهات",
            "تحليل تأثير سيناريوهات مختلفة على الأداء المالي",
            "نسبة صدمات الإيرادات (من -30% إلى +20%) التي يبقى معها الربح التشغيلي موجباً",
        ),
    ),
    (
        "fcf_model",
        (
            "Free Cash Flow Model",
            "Models free cash flow as a share of revenue",
            "(Operating cash flow - Capital expenditures) ÷ Revenue × 100",
        ),
        (
            "نموذج التدفق النقدي الحر",
            "نمذجة التدفقات النقدية الحرة المستقبلية",
            "(التدفق النقدي التشغيلي - النفقات الرأسمالية) ÷ الإيرادات × 100",
        ),
    ),
    (
        "advanced_dupont",
        (
            "Advanced DuPont Model",
            "Splits return on equity into operating return and the effect of financial leverage",
            "ROE = RNOA + FLEV × (RNOA - Net borrowing cost)",
        ),
        (
            "نموذج دوبونت المتقدم",
            "تحليل متقدم لمكونات العائد على حقوق الملكية",
            "العائد على حقوق الملكية = العائد على صافي الأصول التشغيلية + الرافعة × (العائد - تكلفة الاقتراض الصافية)",
        ),
    ),
    (
        "bankruptcy_model",
        (
            "Bankruptcy Prediction Model",
            "Predicts the likelihood of financial distress",
            "Altman Z = 1.2 WC/TA + 1.4 RE/TA + 3.3 EBIT/TA + 0.6 Equity/TL + 1.0 Sales/TA",
        ),
        (
            "نمذجة الإفلاس التنبؤية",
            "نموذج للتنبؤ باحتمالية التعثر المالي",
            "نموذج ألتمان Z بخمسة مؤشرات للسيولة والأرباح المحتجزة والربحية والملاءة والنشاط",
        ),
    ),
    (
        "equilibrium_model",
        (
            "General Equilibrium Model",
            "Checks the balance between assets and their funding sources",
            "min(Total assets, Liabilities + Equity) ÷ max(...) × 100",
        ),
        (
            "نموذج التوازن العام",
            "نمذجة التوازن الاقتصادي الشامل",
            "أصغر القيمتين (إجمالي الأصول، الخصوم + حقوق الملكية) ÷ أكبرهما × 100",
        ),
    ),
    (
        "ai_model",
        (
            "AI Financial Modeling",
            "Logistic health score combining profitability, liquidity and solvency features",
            "100 ÷ (1 + e^(-z)), z a weighted sum of ROA, current ratio, equity ratio, OCF/liabilities and net margin",
        ),
        (
            "نمذجة الذكاء الاصطناعي المالي",
            "نماذج الذكاء الاصطناعي للتحليل المالي",
            "درجة صحة لوجستية من مؤشرات الربحية والسيولة والملاءة",
        ),
    ),
    (
        "standard_deviation",
        (
            "Standard Deviation Analysis",
            "Measures the dispersion of revenue growth around its mean",
            "σ = √(Σ(gᵢ - ḡ)² ÷ (n - 1)) of revenue growth",
        ),
        (
            "تحليل الانحراف المعياري",
            "قياس تشتت البيانات المالية حول المتوسط",
            "الانحراف المعياري لنمو الإيرادات",
        ),
    ),
    (
        "coefficient_variation",
        (
            "Coefficient of Variation",
            "Measures the relative dispersion of revenue",
            "CV = σ(Revenue) ÷ μ(Revenue)",
        ),
        (
            "معامل الاختلاف",
            "قياس التشتت النسبي للبيانات المالية",
            "الانحراف المعياري للإيرادات ÷ متوسط الإيرادات",
        ),
    ),
    (
        "correlation_analysis",
        (
            "Correlation Analysis",
            "Measures the strength and direction of the link between revenue and net income",
            "Pearson r between revenue and net income",
        ),
        (
            "تحليل الارتباط",
            "قياس قوة واتجاه العلاقة بين المتغيرات المالية",
            "معامل ارتباط بيرسون بين الإيرادات وصافي الربح",
        ),
    ),
    (
        "hypothesis_testing",
        (
            "Statistical Hypothesis Testing",
            "Tests whether mean revenue growth differs from zero",
            "p-value of a one-sample t-test on revenue growth",
        ),
        (
            "اختبار الفرضيات الإحصائية",
            "اختبار صحة الفرضيات المالية إحصائياً",
            "القيمة الاحتمالية لاختبار t لعينة واحدة على نمو الإيرادات",
        ),
    ),
    (
        "linear_regression",
        (
            "Linear Regression Analysis",
            "Models the linear trend of revenue over time",
            "R² of Revenue = a + b × Year + ε",
        ),
        (
            "تحليل الانحدار الخطي",
            "نمذجة العلاقة الخطية بين المتغيرات",
            "معامل التحديد R² للاتجاه الخطي للإيرادات عبر الزمن",
        ),
    ),
    (
        "anova",
        (
            "Analysis of Variance",
            "Compares means across several groups (reference level)",
            "F = MSB ÷ MSW",
        ),
        (
            "تحليل التباين ANOVA",
            "مقارنة المتوسطات لمجموعات متعددة",
            "F = MSB / MSW",
        ),
    ),
    (
        "normality_tests",
        (
            "Normal Distribution Tests",
            "Tests whether revenue growth is normally distributed",
            "Shapiro-Wilk p-value of revenue growth",
        ),
        (
            "التوزيع الطبيعي والاختبارات",
            "اختبار التوزيع الطبيعي للبيانات المالية",
            "القيمة الاحتمالية لاختبار شابيرو-ويلك لنمو الإيرادات",
        ),
    ),
    (
        "time_series_stats",
        (
            "Statistical Time Series",
            "Statistical analysis of financial data over time (reference level)",
            "Trend, seasonal and cyclical decomposition",
        ),
        (
            "تحليل السلاسل الزمنية الإحصائي",
            "تحليل إحصائي للبيانات المالية عبر الزمن",
            "تحليل الاتجاه والموسمية والدورية",
        ),
    ),
    (
        "unit_root_test",
        (
            "Unit Root Testing",
            "Tests the stationarity of financial time series (reference level)",
            "ADF, KPSS and Phillips-Perron tests",
        ),
        (
            "اختبار جذر الوحدة",
            "اختبار استقرارية السلاسل الزمنية المالية",
            "اختبارات ADF، KPSS، Phillips-Perron",
        ),
    ),
    (
        "cointegration",
        (
            "Cointegration Analysis",
            "Analyses long-run relationships between variables (reference level)",
            "Johansen cointegration test",
        ),
        (
            "تحليل التكامل المشترك",
            "تحليل العلاقات طويلة المدى بين المتغيرات",
            "اختبار Johansen للتكامل المشترك",
        ),
    ),
    (
        "error_correction",
        (
            "Error Correction Models",
            "Models short-run adjustment towards long-run equilibrium (reference level)",
            "VECM - Vector Error Correction Model",
        ),
        (
            "نماذج تصحيح الخطأ",
            "نمذجة التعديل قصير المدى نحو التوازن طويل المدى",
            "VECM - Vector Error Correction Model",
        ),
    ),
    (
        "factor_analysis",
        (
            "Factor Analysis",
            "Identifies the latent factors driving financial performance (reference level)",
            "Extraction of the principal driving factors",
        ),
        (
            "تحليل العوامل",
            "تحديد العوامل الكامنة المؤثرة في الأداء المالي",
            "استخراج العوامل الرئيسية المؤثرة",
        ),
    ),
    (
        "cluster_analysis",
        (
            "Cluster Analysis",
            "Groups companies or periods by financial characteristics (reference level)",
            "K-means and hierarchical clustering",
        ),
        (
            "التحليل العنقودي",
            "تجميع الشركات أو الفترات بناءً على الخصائص المالية",
            "خوارزميات K-means، الهرمية",
        ),
    ),
    (
        "pca",
        (
            "Principal Component Analysis",
            "Reduces the ratio panel to its main components while keeping the key information",
            "Variance share of the first principal component of the standardized ratio panel",
        ),
        (
            "تحليل المكونات الرئيسية",
            "تقليل أبعاد البيانات مع الحفاظ على المعلومات المهمة",
            "نسبة التباين المفسر بالمكون الرئيسي الأول لمصفوفة النسب المعيارية",
        ),
    ),
    (
        "advanced_descriptive",
        (
            "Advanced Descriptive Statistics",
            "Advanced descriptive statistics of the financial data (reference level)",
            "Moments, skewness and kurtosis",
        ),
        (
            "الإحصاء الوصفي المتقدم",
            "إحصائيات وصفية متقدمة للبيانات المالية",
            "العزوم، معاملات الالتواء والتفلطح",
        ),
    ),
    (
        "nonlinearity_tests",
        (
            "Non-linearity Tests",
            "Tests for non-linear relationships in the financial data (reference level)",
            "BDS and Teräsvirta tests",
        ),
        (
            "اختبارات عدم الخطية",
            "اختبار وجود علاقات غير خطية في البيانات المالية",
            "اختبارات BDS، Teräsvirta",
        ),
    ),
    (
        "arima_forecast",
        (
            "ARIMA Forecasting Model",
            "Forecasts next-period revenue from its fitted trend",
            "Trend forecast of next-period revenue ÷ Current revenue × 100",
        ),
        (
            "نموذج ARIMA للتنبؤ",
            "التنبؤ بالسلاسل الزمنية المالية باستخدام نموذج ARIMA",
            "الإيرادات المتوقعة للفترة القادمة من الاتجاه ÷ الإيرادات الحالية × 100",
        ),
    ),
    (
        "neural_network_forecast",
        (
            "Neural Network Forecasting",
            "Forecasting with artificial neural networks (reference level)",
            "Deep learning forecasting algorithms",
        ),
        (
            "تحليل الشبكات العصبية للتنبؤ",
            "التنبؤ باستخدام الشبكات العصبية الاصطناعية",
            "خوارزميات التعلم العميق للتنبؤ المالي",
        ),
    ),
    (
        "ml_credit_scoring",
        (
            "ML Credit Scoring",
            "Credit risk classification with machine learning (reference level)",
            "Random Forest, SVM and Gradient Boosting",
        ),
        (
            "نماذج التعلم الآلي للتصنيف الائتماني",
            "تصنيف المخاطر الائتمانية باستخدام التعلم الآلي",
            "خوارزميات Random Forest, SVM, Gradient Boosting",
        ),
    ),
    (
        "traditional_credit",
        (
            "Traditional Credit Analysis",
            "Scores credit risk with classic coverage, leverage, liquidity and margin tests",
            "Sum of banded points (0-25 each) for interest cover, D/E, current ratio and net margin",
        ),
        (
            "تحليل الائتمان التقليدي",
            "تحليل المخاطر الائتمانية بالطرق التقليدية",
            "مجموع نقاط الشرائح لتغطية الفوائد والرافعة والسيولة وهامش الربح",
        ),
    ),
    (
        "cash_flow_forecast",
        (
            "Cash Flow Forecasting",
            "Forecasts next-period operating cash flow",
            "Current operating cash flow × (1 + mean historical growth, capped at ±50%)",
        ),
        (
            "نموذج التنبؤ بالتدفقات النقدية",
            "التنبؤ بالتدفقات النقدية المستقبلية",
            "التدفق النقدي التشغيلي الحالي × (1 + متوسط النمو التاريخي بحد ±50%)",
        ),
    ),
    (
        "default_probability",
        (
            "Default Probability Analysis",
            "Estimates the probability of defaulting on obligations",
            "N(-Distance to default) × 100",
        ),
        (
            "تحليل احتمالية التعثر",
            "تقدير احتمالية التعثر في السداد",
            "N(-مسافة التعثر) × 100",
        ),
    ),
    (
        "sales_forecast",
        (
            "Sales Forecasting Models",
            "Forecasts next-period revenue",
            "Current revenue × (1 + mean historical growth, capped at ±50%)",
        ),
        (
            "نماذج التنبؤ بالمبيعات",
            "التنبؤ بالمبيعات والإيرادات المستقبلية",
            "الإيرادات الحالية × (1 + متوسط النمو التاريخي بحد ±50%)",
        ),
    ),
    (
        "earnings_forecast",
        (
            "Earnings Forecasting",
            "Forecasts next-period net income",
            "Current net income × (1 + mean historical growth, capped at ±50%)",
        ),
        (
            "تحليل التنبؤ بالأرباح",
            "التنبؤ بالأرباح والعوائد المستقبلية",
            "صافي الربح الحالي × (1 + متوسط النمو التاريخي بحد ±50%)",
        ),
    ),
    (
        "institutional_risk",
        (
            "Institutional Risk Rating",
            "Rates risk at the institutional level (reference level)",
            "Comprehensive assessment of operational and financial risk",
        ),
        (
            "تصنيف المخاطر المؤسسية",
            "تصنيف المخاطر على المستوى المؤسسي",
            "تقييم شامل للمخاطر التشغيلية والمالية",
        ),
    ),
    (
        "macro_economic_forecast",
        (
            "Macroeconomic Forecasting",
            "Forecasts the macroeconomic variables that affect the company (reference level)",
            "GDP, inflation and interest-rate models",
        ),
        (
            "نماذج التنبؤ الاقتصادي الكلي",
            "التنبؤ بالمتغيرات الاقتصادية الكلية المؤثرة",
            "نماذج الناتج المحلي والتضخم وأسعار الفائدة",
        ),
    ),
    (
        "conditional_var",
        (
            "Conditional Value at Risk",
            "Estimates the expected loss beyond the value at risk",
            "Mean of operating cash flow changes beyond the 95% VaR ÷ |Current operating cash flow| × 100",
        ),
        (
            "تحليل القيمة المعرضة للخطر المشروطة",
            "تقدير الخسارة المتوقعة بعد تجاوز VaR",
            "متوسط تغيرات التدفق النقدي التشغيلي بعد تجاوز VaR عند 95% ÷ التدفق الحالي × 100",
        ),
    ),
    (
        "operational_risk",
        (
            "Operational Risk Analysis",
            "Assesses risk arising from internal processes (reference level)",
            "Loss Distribution Approach models",
        ),
        (
            "تحليل المخاطر التشغيلية",
            "تقييم المخاطر الناتجة عن العمليات الداخلية",
            "نماذج Loss Distribution Approach",
        ),
    ),
    (
        "market_risk",
        (
            "Market Risk Analysis",
            "Assesses risk arising from market movements (reference level)",
            "Delta, Gamma, Vega and Theta Greeks",
        ),
        (
            "تحليل مخاطر السوق",
            "تقييم المخاطر الناتجة عن تقلبات السوق",
            "Delta, Gamma, Vega, Theta Greeks",
        ),
    ),
    (
        "credit_risk",
        (
            "Credit Risk Analysis",
            "Assesses the risk of counterparties failing to pay (reference level)",
            "PD, LGD and EAD models",
        ),
        (
            "تحليل مخاطر الائتمان",
            "تقييم مخاطر التعثر في السداد",
            "PD, LGD, EAD Models",
        ),
    ),
    (
        "liquidity_risk",
        (
            "Liquidity Risk Analysis",
            "Measures short-term obligations against liquid resources",
            "Current liabilities ÷ (Cash + Short-term investments + Receivables)",
        ),
        (
            "تحليل مخاطر السيولة",
            "تقييم المخاطر المتعلقة بتوفر السيولة",
            "الخصوم الجارية ÷ (النقد + الاستثمارات قصيرة الأجل + الذمم المدينة)",
        ),
    ),
    (
        "aggregate_risk",
        (
            "Aggregate Risk Analysis",
            "Aggregates and assesses all risk types (reference level)",
            "Risk aggregation models",
        ),
        (
            "تحليل المخاطر المجمعة",
            "تجميع وتقييم جميع أنواع المخاطر",
            "Risk Aggregation Models",
        ),
    ),
    (
        "stress_testing",
        (
            "Stress Testing",
            "Tests whether interest cover survives a revenue shock and higher funding costs",
            "(EBIT - 20% × Contribution margin) ÷ (Interest expense × 1.5)",
        ),
        (
            "اختبارات الضغط",
            "اختبار قدرة الشركة على تحمل الصدمات",
            "(الأرباح قبل الفوائد والضرائب - 20% من هامش المساهمة) ÷ (الفوائد × 1.5)",
        ),
    ),
    (
        "risk_sensitivity",
        (
            "Risk Sensitivity Analysis",
            "Analyses how risk responds to changes in key variables (reference level)",
            "Sensitivity to interest rates and volatility",
        ),
        (
            "تحليل الحساسية للمخاطر",
            "تحليل حساسية المخاطر للتغيرات في المتغيرات",
            "Sensitivity to Interest Rates, Volatility",
        ),
    ),
    (
        "interest_rate_risk",
        (
            "Interest Rate Risk",
            "Measures the earnings impact of a rise in interest rates",
            "2pp × Total debt ÷ Earnings before tax × 100",
        ),
        (
            "تحليل مخاطر أسعار الفائدة",
            "تقييم تأثير تغيرات أسعار الفائدة",
            "2 نقطة مئوية × إجمالي الديون ÷ الأرباح قبل الضرائب × 100",
        ),
    ),
    (
        "fx_risk",
        (
            "Foreign Exchange Risk",
            "Assesses exposure to exchange-rate movements (reference level)",
            "Transaction, translation and economic exposure",
        ),
        (
            "تحليل مخاطر أسعار الصرف",
            "تقييم مخاطر تقلبات أسعار الصرف",
            "Transaction, Translation, Economic Exposure",
        ),
    ),
    (
        "simulation_risk",
        (
            "Simulation-based Risk Analysis",
            "Analyses risk with numerical simulation (reference level)",
            "Monte Carlo risk simulation",
        ),
        (
            "تحليل المخاطر بالمحاكاة",
            "تحليل المخاطر باستخدام المحاكاة الرقمية",
            "Monte Carlo Risk Simulation",
        ),
    ),
    (
        "model_risk",
        (
            "Model Risk Analysis",
            "Assesses risk arising from the use of models (reference level)",
            "Model validation and back-testing",
        ),
        (
            "تحليل مخاطر النموذج",
            "تقييم المخاطر الناتجة عن استخدام النماذج",
            "Model Validation, Back-testing",
        ),
    ),
    (
        "concentration_risk",
        (
            "Concentration Risk",
            "Assesses concentration in exposures (reference level)",
            "Single-name and sector concentration",
        ),
        (
            "تحليل مخاطر التركز",
            "تقييم مخاطر التركز في المحافظ",
            "Single Name, Sector Concentration",
        ),
    ),
    (
        "conditional_loss",
        (
            "Conditional Loss Distribution",
            "Models the loss distribution under stressed conditions (reference level)",
            "Extreme Value Theory",
        ),
        (
            "التوزيع الشرطي للخسائر",
            "نمذجة توزيع الخسائر في ظروف معينة",
            "Extreme Value Theory",
        ),
    ),
    (
        "regulatory_risk",
        (
            "Regulatory Risk Analysis",
            "Assesses risk arising from regulatory change (reference level)",
            "Compliance risk assessment",
        ),
        (
            "تحليل المخاطر التنظيمية",
            "تقييم المخاطر الناتجة عن التغيرات التنظيمية",
            "Compliance Risk Assessment",
        ),
    ),
    (
        "capital_risk",
        (
            "Capital Risk Analysis",
            "Assesses capital adequacy against risk (reference level)",
            "Economic and regulatory capital",
        ),
        (
            "تحليل مخاطر رأس المال",
            "تقييم كفاية رأس المال لمواجهة المخاطر",
            "Economic Capital, Regulatory Capital",
        ),
    ),
    (
        "esg_risk",
        (
            "ESG Risk Analysis",
            "Assesses environmental, social and governance risk (reference level)",
            "Environmental, social and governance factors",
        ),
        (
            "تحليل المخاطر البيئية والاجتماعية",
            "تقييم المخاطر البيئية والاجتماعية والحوكمة",
            "Environmental, Social, Governance Factors",
        ),
    ),
    (
        "cyber_risk",
        (
            "Cyber Risk Analysis",
            "Assesses technology and cyber-security risk (reference level)",
            "Information security risk assessment",
        ),
        (
            "تحليل مخاطر التكنولوجيا والأمن السيبراني",
            "تقييم المخاطر السيبرانية والتكنولوجية",
            "Information Security Risk Assessment",
        ),
    ),
    (
        "reputation_risk",
        (
            "Reputation Risk Analysis",
            "Assesses risk to the company's reputation (reference level)",
            "Brand value at risk",
        ),
        (
            "تحليل مخاطر السمعة",
            "تقييم المخاطر المتعلقة بسمعة الشركة",
            "Brand Value at Risk",
        ),
    ),
    (
        "inflation_risk",
        (
            "Inflation Risk Analysis",
            "Assesses the effect of inflation on real value (reference level)",
            "Real versus nominal returns",
        ),
        (
            "تحليل مخاطر التضخم",
            "تقييم تأثير التضخم على القيمة الحقيقية",
            "Real vs Nominal Returns Analysis",
        ),
    ),
    (
        "industry_risk",
        (
            "Industry Sector Risk",
            "Assesses risk specific to the sector and industry (reference level)",
            "Industry beta and sector correlation",
        ),
        (
            "تحليل مخاطر القطاع والصناعة",
            "تقييم المخاطر الخاصة بالقطاع والصناعة",
            "Industry Beta, Sector Correlation",
        ),
    ),
    (
        "geopolitical_risk",
        (
            "Geopolitical Risk Analysis",
            "Assesses risk arising from geopolitical events (reference level)",
            "Country and political risk assessment",
        ),
        (
            "تحليل المخاطر الجيوسياسية",
            "تقييم المخاطر الناتجة عن الأحداث الجيوسياسية",
            "Country Risk, Political Risk Assessment",
        ),
    ),
    (
        "derivatives_risk",
        (
            "Derivatives Risk Analysis",
            "Assesses the risk of derivative instruments (reference level)",
            "Options, futures and swaps risk",
        ),
        (
            "تحليل مخاطر المشتقات المالية",
            "تقييم مخاطر الأدوات المالية المشتقة",
            "Options, Futures, Swaps Risk",
        ),
    ),
    (
        "climate_risk",
        (
            "Climate Risk Analysis",
            "Assesses risk arising from climate change (reference level)",
            "Physical and transition climate risks",
        ),
        (
            "تحليل المخاطر المناخية",
            "تقييم المخاطر الناتجة عن التغير المناخي",
            "Physical and Transition Climate Risks",
        ),
    ),
    (
        "supply_chain_risk",
        (
            "Supply Chain Risk",
            "Assesses risk in the supply chain (reference level)",
            "Supplier and logistics risk",
        ),
        (
            "تحليل مخاطر سلسلة التوريد",
            "تقييم المخاطر في سلسلة التوريد والإمداد",
            "Supplier Risk, Logistics Risk",
        ),
    ),
    (
        "markowitz_portfolio",
        (
            "Markowitz Portfolio Analysis",
            "Portfolio optimization under modern portfolio theory (reference level)",
            "Mean-variance optimization",
        ),
        (
            "تحليل ماركوفيتز للمحفظة",
            "تحسين المحفظة بناءً على نظرية ماركوفيتز",
            "Mean-Variance Optimization",
        ),
    ),
    (
        "capm_analysis",
        (
            "CAPM Analysis",
            "Estimates the return shareholders require with the capital asset pricing model",
            "E(R) = Rf + β(E(Rm) - Rf)",
        ),
        (
            "نموذج تسعير الأصول الرأسمالية",
            "تحليل العائد المطلوب باستخدام نموذج CAPM",
            "E(R) = Rf + β(E(Rm) - Rf)",
        ),
    ),
    (
        "fama_french",
        (
            "Fama-French Three Factor",
            "Explains returns with market, size and value factors (reference level)",
            "Market, size and value factors",
        ),
        (
            "نموذج الثلاثة عوامل فاما-فرينش",
            "تحليل العوائد باستخدام نموذج فاما-فرينش",
            "Market, Size, Value Factors",
        ),
    ),
    (
        "alpha_beta",
        (
            "Alpha and Beta Analysis",
            "Measures risk-adjusted performance and market sensitivity (reference level)",
            "Jensen alpha and market beta",
        ),
        (
            "تحليل ألفا وبيتا",
            "قياس الأداء المعدل حسب المخاطر والحساسية للسوق",
            "Jensen Alpha, Market Beta",
        ),
    ),
    (
        "performance_attribution",
        (
            "Performance Attribution",
            "Analyses the sources of portfolio performance (reference level)",
            "Asset allocation and security selection effects",
        ),
        (
            "تحليل تقييم الأداء",
            "تحليل مصادر أداء المحفظة الاستثمارية",
            "Asset Allocation, Security Selection Effects",
        ),
    ),
    (
        "information_ratio",
        (
            "Information Ratio Analysis",
            "Measures excess return per unit of tracking error (reference level)",
            "Excess return ÷ Tracking error",
        ),
        (
            "تحليل نسب المعلومات",
            "قياس العائد الإضافي لكل وحدة مخاطر تتبع",
            "Excess Return / Tracking Error",
        ),
    ),
    (
        "diversification",
        (
            "Diversification Analysis",
            "Assesses how well diversification reduces risk (reference level)",
            "Correlation matrix and diversification ratio",
        ),
        (
            "تحليل التنويع والترابط",
            "تقييم فعالية التنويع في تقليل المخاطر",
            "Correlation Matrix, Diversification Ratio",
        ),
    ),
    (
        "style_analysis",
        (
            "Investment Style Analysis",
            "Identifies the investment style and tilts of the portfolio (reference level)",
            "Growth versus value, large versus small cap",
        ),
        (
            "تحليل أسلوب الاستثمار",
            "تحديد أسلوب الاستثمار والانحياز في المحفظة",
            "Growth vs Value, Large vs Small Cap",
        ),
    ),
    (
        "market_timing",
        (
            "Market Timing Analysis",
            "Assesses the manager's ability to time market entry and exit (reference level)",
            "Treynor-Mazuy model",
        ),
        (
            "تحليل توقيت السوق",
            "تقييم قدرة المدير على توقيت دخول وخروج السوق",
            "Treynor-Mazuy Model",
        ),
    ),
    (
        "portfolio_efficiency",
        (
            "Portfolio Efficiency Analysis",
            "Assesses the portfolio's position against the efficient frontier (reference level)",
            "Efficient frontier analysis",
        ),
        (
            "تحليل كفاءة المحفظة",
            "تقييم كفاءة المحفظة على الحدود الفعالة",
            "Efficient Frontier Analysis",
        ),
    ),
    (
        "rebalancing",
        (
            "Rebalancing Analysis",
            "Analyses portfolio rebalancing strategies (reference level)",
            "Calendar versus threshold rebalancing",
        ),
        (
            "تحليل إعادة التوازن",
            "تحليل استراتيجيات إعادة توازن المحفظة",
            "Calendar vs Threshold Rebalancing",
        ),
    ),
    (
        "active_risk",
        (
            "Active Risk Analysis",
            "Measures risk from deviating from the benchmark index (reference level)",
            "Tracking error and active share",
        ),
        (
            "تحليل المخاطر النشطة",
            "قياس المخاطر الناتجة عن الانحراف عن المؤشر",
            "Tracking Error, Active Share",
        ),
    ),
    (
        "quantitative_investment",
        (
            "Quantitative Investment Analysis",
            "Investment strategies built on quantitative models (reference level)",
            "Factor and multi-factor models",
        ),
        (
            "تحليل الاستثمار الكمي",
            "استراتيجيات الاستثمار القائمة على النماذج الكمية",
            "Factor Models, Multi-Factor Analysis",
        ),
    ),
    (
        "investment_strategy",
        (
            "Investment Strategy Analysis",
            "Assesses the effectiveness of investment strategies (reference level)",
            "Buy and hold, momentum and mean reversion",
        ),
        (
            "تحليل استراتيجية الاستثمار",
            "تقييم فعالية استراتيجيات الاستثمار المختلفة",
            "Buy & Hold, Momentum, Mean Reversion",
        ),
    ),
    (
        "ma_valuation",
        (
            "M&A Valuation Analysis",
            "Values companies in mergers and acquisitions (reference level)",
            "DCF, comparable companies and precedent transactions",
        ),
        (
            "تحليل التقييم للاندماج",
            "تقييم الشركات في عمليات الاندماج والاستحواذ",
            "DCF, Comparable Companies, Precedent Transactions",
        ),
    ),
    (
        "synergy_analysis",
        (
            "Synergy Analysis",
            "Assesses the value added by merger synergies (reference level)",
            "Revenue, cost and tax synergies",
        ),
        (
            "تحليل التآزر والقيمة المضافة",
            "تقييم القيمة المضافة من التآزر في الاندماج",
            "Revenue, Cost, Tax Synergies",
        ),
    ),
    (
        "deal_structure",
        (
            "Deal Structure Analysis",
            "Analyses the financing and payment structure of a deal (reference level)",
            "Cash versus stock, debt financing structure",
        ),
        (
            "تحليل هيكل الصفقة",
            "تحليل هيكل التمويل والدفع في الاندماج",
            "Cash vs Stock, Debt Financing Structure",
        ),
    ),
    (
        "shareholder_impact",
        (
            "Shareholder Impact Analysis",
            "Assesses the effect of a merger on shareholder value (reference level)",
            "Accretion and dilution analysis",
        ),
        (
            "تحليل أثر الاندماج على المساهمين",
            "تقييم تأثير الاندماج على قيمة أسهم المساهمين",
            "Accretion/Dilution Analysis",
        ),
    ),
    (
        "ma_risk",
        (
            "M&A Risk Analysis",
            "Assesses the risks that accompany mergers (reference level)",
            "Integration and regulatory risk",
        ),
        (
            "تحليل المخاطر في الاندماج",
            "تقييم المخاطر المصاحبة لعمليات الاندماج",
            "Integration Risk, Regulatory Risk",
        ),
    ),
    (
        "fraud_detection",
        (
            "Financial Fraud Detection",
            "Screens reported figures for irregularities",
            "Benford's law first-digit conformity: 100 × (1 - total variation distance)",
        ),
        (
            "كشف الاحتيال المالي",
            "اكتشاف المخالفات والاحتيال في البيانات المالية",
            "مدى مطابقة الأرقام الأولى لقانون بنفورد: 100 × (1 - مسافة التباين الكلي)",
        ),
    ),
    (
        "earnings_manipulation",
        (
            "Earnings Manipulation Detection",
            "Estimates the probability that reported earnings are manipulated",
            "N(Beneish M-score) × 100",
        ),
        (
            "كشف التلاعب في الأرباح",
            "اكتشاف التلاعب في الأرباح والإيرادات",
            "N(مؤشر بينيش M) × 100",
        ),
    ),
    (
        "anomaly_detection",
        (
            "Anomaly Detection",
            "Detects unusual values among the key statement lines",
            "Share of key lines whose latest value lies within 2σ of prior periods",
        ),
        (
            "كشف الانحرافات غير الطبيعية",
            "اكتشاف الأنماط والقيم الشاذة في البيانات",
            "نسبة البنود الرئيسية التي تقع قيمتها الأخيرة ضمن انحرافين معياريين عن الفترات السابقة",
        ),
    ),
    (
        "crisis_prediction",
        (
            "Financial Crisis Prediction",
            "Early-warning estimate of financial crisis risk",
            "(9 - Piotroski F-score) ÷ 9 × 100",
        ),
        (
            "التنبؤ بالأزمات المالية",
            "التنبؤ بحدوث الأزمات المالية المحتملة",
            "(9 - مؤشر بيوتروسكي F) ÷ 9 × 100",
        ),
    ),
    (
        "volatility_clustering",
        (
            "Volatility Clustering Detection",
            "Detects clustered periods of high volatility (reference level)",
            "ARCH/GARCH models",
        ),
        (
            "كشف التقلبات الاستثنائية",
            "اكتشاف فترات التقلبات العالية المتجمعة",
            "ARCH/GARCH Models",
        ),
    ),
    (
        "trend_forecasting",
        (
            "Trend Forecasting",
            "Measures the direction and strength of the revenue trend",
            "Fitted annual revenue slope ÷ Mean revenue × 100",
        ),
        (
            "التنبؤ بالاتجاهات",
            "التنبؤ بالاتجاهات المستقبلية للمؤشرات المالية",
            "ميل الاتجاه السنوي للإيرادات ÷ متوسط الإيرادات × 100",
        ),
    ),
    (
        "statement_manipulation",
        (
            "Financial Statement Manipulation",
            "Screens the statements for distress that often accompanies manipulation",
            "Altman Z'' = 6.56 WC/TA + 3.26 RE/TA + 6.72 EBIT/TA + 1.05 Equity/TL",
        ),
        (
            "كشف التلاعب في القوائم المالية",
            "اكتشاف التلاعب في القوائم المالية",
            "نموذج ألتمان Z'' المعدل للشركات غير الصناعية",
        ),
    ),
    (
        "stock_price_prediction",
        (
            "Stock Price Prediction",
            "Estimates an earnings-based price for the share",
            "EPS × 15",
        ),
        (
            "التنبؤ بأسعار الأسهم",
            "التنبؤ بحركة أسعار الأسهم المستقبلية",
            "ربحية السهم × 15",
        ),
    ),
    (
        "warning_signals",
        (
            "Warning Signals Detection",
            "Counts the warning signs of financial deterioration",
            "Number of failed Piotroski signals",
        ),
        (
            "كشف الإشارات التحذيرية",
            "اكتشاف الإشارات التحذيرية للتدهور المالي",
            "عدد إشارات بيوتروسكي غير المحققة",
        ),
    ),
    (
        "performance_prediction",
        (
            "Future Performance Prediction",
            "Predicts the company's future financial performance (reference level)",
            "Predictive analytics models",
        ),
        (
            "التنبؤ بالأداء المستقبلي",
            "التنبؤ بالأداء المالي المستقبلي للشركة",
            "Predictive Analytics Models",
        ),
    ),
    (
        "trend_seasonality",
        (
            "Trend and Seasonality Analysis",
            "Analyses long-run trends and seasonal patterns (reference level)",
            "Decomposition and X-13ARIMA-SEATS",
        ),
        (
            "تحليل الاتجاه والموسمية",
            "تحليل الاتجاهات طويلة المدى والأنماط الموسمية",
            "Decomposition, X-13ARIMA-SEATS",
        ),
    ),
    (
        "business_cycle",
        (
            "Business Cycle Analysis",
            "Analyses economic cycles and their effect on performance (reference level)",
            "Spectral analysis and band-pass filters",
        ),
        (
            "تحليل الدورية الاقتصادية",
            "تحليل الدورات الاقتصادية وأثرها على الأداء",
            "Spectral Analysis, Band-Pass Filters",
        ),
    ),
    (
        "volatility_analysis",
        (
            "Volatility Analysis",
            "Analyses the volatility of operating cash flow growth",
            "Sample standard deviation of operating cash flow growth (%)",
        ),
        (
            "تحليل التقلبات والتذبذبات",
            "تحليل أنماط التقلبات في البيانات المالية",
            "الانحراف المعياري لنمو التدفق النقدي التشغيلي",
        ),
    ),
    (
        "structural_breaks",
        (
            "Structural Break Analysis",
            "Detects structural changes in time series (reference level)",
            "Chow and CUSUM tests",
        ),
        (
            "تحليل الانكسارات الهيكلية",
            "اكتشاف التغيرات الهيكلية في السلاسل الزمنية",
            "Chow Test, CUSUM Tests",
        ),
    ),
    (
        "spectral_analysis",
        (
            "Spectral Analysis",
            "Analyses the frequency components of time series (reference level)",
            "Fourier transform and periodogram",
        ),
        (
            "تحليل الطيف الترددي",
            "تحليل المكونات الترددية للسلاسل الزمنية",
            "Fourier Transform, Periodogram",
        ),
    ),
    (
        "convergence_divergence",
        (
            "Convergence Divergence Analysis",
            "Analyses convergence and divergence between time series (reference level)",
            "MACD and relative strength",
        ),
        (
            "تحليل التقارب والتباعد",
            "تحليل التقارب والتباعد بين السلاسل الزمنية",
            "MACD, Relative Strength Analysis",
        ),
    ),
]


def _build(*sections: List[_Row]) -> Dict[str, Dict[str, AnalysisText]]:
    table: Dict[str, Dict[str, AnalysisText]] = {}
    for rows in sections:
        for analysis_id, english, arabic in rows:
            if analysis_id in table:
                raise ValueError(f"Duplicate text entry for '{analysis_id}'.")
            table[analysis_id] = {"en": AnalysisText(*english), "ar": AnalysisText(*arabic)}
    return table


ANALYSIS_TEXT: Dict[str, Dict[str, AnalysisText]] = _build(CLASSICAL_TEXT, INTERMEDIATE_TEXT, ADVANCED_TEXT)


def analysis_text(analysis_id: str, language: str) -> AnalysisText:
    """Localized text for ``analysis_id``; unknown ids get a title-cased name."""
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'.")
    entry = ANALYSIS_TEXT.get(analysis_id)
    if entry is None:
        return AnalysisText(analysis_id.replace("_", " ").title(), "", "")
    return entry[language]
