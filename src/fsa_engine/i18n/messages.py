"""Localized message templates used by scoring, enrichment and the summary.

Every template is looked up by ``(template_id, language)`` and rendered with
``str.format``. Numbers are pre-formatted by the caller.
"""
from __future__ import annotations

from typing import Dict, Mapping, Tuple

from fsa_engine.domain.models.financials import SUPPORTED_LANGUAGES

Bilingual = Dict[str, str]


def _t(en: str, ar: str) -> Bilingual:
    return {"en": en, "ar": ar}


RATING_LABELS: Dict[str, Bilingual] = {
    "excellent": _t("Excellent", "ممتاز"),
    "very_good": _t("Very Good", "جيد جداً"),
    "good": _t("Good", "جيد"),
    "acceptable": _t("Acceptable", "مقبول"),
    "poor": _t("Poor", "ضعيف"),
}

TIER_TITLES: Dict[str, Bilingual] = {
    "classical": _t("Classical Foundational Analysis", "التحليل الأساسي الكلاسيكي"),
    "intermediate": _t("Intermediate Applied Analysis", "التحليل التطبيقي المتوسط"),
    "advanced": _t("Advanced Analysis", "التحليل المتقدم والمتطور"),
}

CATEGORY_TITLES: Dict[str, Bilingual] = {
    "structural": _t("Structural Analysis of Financial Statements", "التحليل الهيكلي للقوائم المالية"),
    "liquidity": _t("Liquidity Ratios", "نسب السيولة"),
    "activity": _t("Activity Ratios", "نسب النشاط والكفاءة"),
    "profitability": _t("Profitability Ratios", "نسب الربحية"),
    "leverage": _t("Leverage Ratios", "نسب الرافعة المالية والمديونية"),
    "market": _t("Market Ratios", "نسب السوق"),
    "cash_flow": _t("Cash Flow and Movement Analysis", "تحليلات التدفق والحركة"),
    "comparison": _t("Comparative Analysis", "التحليل المقارن"),
    "valuation": _t("Valuation and Investment Analysis", "تحليل التقييم والاستثمار"),
    "performance": _t("Performance and Efficiency Analysis", "تحليل الأداء والكفاءة"),
    "modeling": _t("Modeling and Simulation", "النمذجة والمحاكاة"),
    "statistical": _t("Statistical and Quantitative Analysis", "التحليل الإحصائي والكمي"),
    "forecasting": _t("Forecasting and Credit Analysis", "التنبؤ والتحليل الائتماني"),
    "risk": _t("Quantitative Risk Analysis", "التحليل الكمي للمخاطر"),
    "portfolio": _t("Portfolio and Investment Analysis", "تحليل المحافظ والاستثمار"),
    "mergers": _t("Mergers and Acquisitions Analysis", "تحليل الاندماج والاستحواذ"),
    "detection": _t("Detection and Prediction", "الكشف والتنبؤ"),
    "time_series": _t("Time Series Analysis", "تحليل السلاسل الزمنية"),
}

# (what it measures, meaning, benefits) per category.
CATEGORY_CONTEXT: Dict[str, Tuple[Bilingual, Bilingual, Bilingual]] = {
    "structural": (
        _t("The composition and evolution of the financial statements", "تركيبة القوائم المالية وتطورها"),
        _t("Shows where the company's resources and results come from", "يوضح مصادر موارد الشركة ونتائجها"),
        _t("Helps compare structure across periods and companies", "يساعد في مقارنة الهيكل عبر الفترات والشركات"),
    ),
    "liquidity": (
        _t("The company's ability to meet its short-term obligations", "قدرة الشركة على الوفاء بالتزاماتها قصيرة الأجل"),
        _t("An indicator of the company's short-term financial health", "مؤشر على الصحة المالية قصيرة الأجل للشركة"),
        _t("Helps assess financial risk and plan liquidity", "يساعد في تقييم المخاطر المالية والتخطيط للسيولة"),
    ),
    "activity": (
        _t("How efficiently the company uses its assets and working capital", "كفاءة الشركة في استخدام أصولها ورأس مالها العامل"),
        _t("Faster turnover usually signals tighter operational management", "يشير الدوران الأسرع عادة إلى إدارة تشغيلية أكثر إحكاماً"),
        _t("Helps find capital tied up in inventory and receivables", "يساعد في تحديد رأس المال المحتجز في المخزون والذمم"),
    ),
    "profitability": (
        _t("The company's ability to turn sales and capital into profit", "قدرة الشركة على تحويل المبيعات ورأس المال إلى أرباح"),
        _t("An indicator of earning power and pricing strength", "مؤشر على القدرة الربحية وقوة التسعير"),
        _t("Helps evaluate management performance and future returns", "يساعد في تقييم أداء الإدارة والعوائد المستقبلية"),
    ),
    "leverage": (
        _t("How the company finances its assets and services its debt", "كيفية تمويل الشركة لأصولها وخدمة ديونها"),
        _t("An indicator of solvency and financial risk", "مؤشر على الملاءة المالية والمخاطر المالية"),
        _t("Helps judge borrowing capacity and capital structure", "يساعد في تقدير القدرة على الاقتراض وهيكل رأس المال"),
    ),
    "market": (
        _t("How the market prices the company's earnings, assets and dividends", "كيفية تسعير السوق لأرباح الشركة وأصولها وتوزيعاتها"),
        _t("An indicator of investor expectations", "مؤشر على توقعات المستثمرين"),
        _t("Helps compare valuation with peers", "يساعد في مقارنة التقييم مع الشركات المماثلة"),
    ),
    "cash_flow": (
        _t("The generation and use of cash and the behaviour of costs", "توليد النقد واستخدامه وسلوك التكاليف"),
        _t("Shows whether earnings are backed by cash", "يوضح مدى دعم الأرباح بالتدفقات النقدية"),
        _t("Helps plan funding, investment and dividends", "يساعد في تخطيط التمويل والاستثمار والتوزيعات"),
    ),
    "comparison": (
        _t("The company's position against its sector, history and competitors", "موقع الشركة مقارنة بقطاعها وتاريخها ومنافسيها"),
        _t("An indicator of relative competitive strength", "مؤشر على القوة التنافسية النسبية"),
        _t("Helps set realistic performance targets", "يساعد في وضع أهداف أداء واقعية"),
    ),
    "valuation": (
        _t("The intrinsic value of the company and its return for the risk taken", "القيمة الجوهرية للشركة وعائدها مقابل المخاطر"),
        _t("Shows whether value is being created for shareholders", "يوضح مدى خلق القيمة للمساهمين"),
        _t("Supports investment and pricing decisions", "يدعم قرارات الاستثمار والتسعير"),
    ),
    "performance": (
        _t("Overall operating efficiency and management quality", "الكفاءة التشغيلية الإجمالية وجودة الإدارة"),
        _t("An indicator of how well resources are converted into results", "مؤشر على كفاءة تحويل الموارد إلى نتائج"),
        _t("Helps target operational improvements", "يساعد في توجيه التحسينات التشغيلية"),
    ),
    "modeling": (
        _t("Model-based views of value, distress and scenarios", "رؤى قائمة على النماذج للقيمة والتعثر والسيناريوهات"),
        _t("Shows how results behave under uncertainty", "يوضح سلوك النتائج في ظل عدم اليقين"),
        _t("Supports planning under different scenarios", "يدعم التخطيط في ظل سيناريوهات مختلفة"),
    ),
    "statistical": (
        _t("Statistical properties of the company's financial series", "الخصائص الإحصائية للسلاسل المالية للشركة"),
        _t("Shows the stability and structure of results over time", "يوضح استقرار النتائج وبنيتها عبر الزمن"),
        _t("Helps separate signal from noise", "يساعد في تمييز الإشارات الحقيقية عن الضوضاء"),
    ),
    "forecasting": (
        _t("Expected future results and creditworthiness", "النتائج المستقبلية المتوقعة والجدارة الائتمانية"),
        _t("An indicator of the company's outlook", "مؤشر على آفاق الشركة المستقبلية"),
        _t("Supports budgeting and credit decisions", "يدعم إعداد الموازنات والقرارات الائتمانية"),
    ),
    "risk": (
        _t("Exposure to financial and operational risks", "التعرض للمخاطر المالية والتشغيلية"),
        _t("Shows the size of potential losses", "يوضح حجم الخسائر المحتملة"),
        _t("Supports risk management and capital planning", "يدعم إدارة المخاطر وتخطيط رأس المال"),
    ),
    "portfolio": (
        _t("The company's profile as an investment", "خصائص الشركة كفرصة استثمارية"),
        _t("Relates required return to risk", "يربط العائد المطلوب بالمخاطر"),
        _t("Supports portfolio construction decisions", "يدعم قرارات بناء المحافظ"),
    ),
    "mergers": (
        _t("Value and risk in mergers and acquisitions", "القيمة والمخاطر في عمليات الاندماج والاستحواذ"),
        _t("Shows the potential effect of a transaction", "يوضح الأثر المحتمل للصفقة"),
        _t("Supports deal evaluation", "يدعم تقييم الصفقات"),
    ),
    "detection": (
        _t("Warning signs, anomalies and possible manipulation", "الإشارات التحذيرية والقيم الشاذة والتلاعب المحتمل"),
        _t("An indicator of reporting quality and distress", "مؤشر على جودة التقارير والتعثر المالي"),
        _t("Helps detect problems early", "يساعد في الكشف المبكر عن المشكلات"),
    ),
    "time_series": (
        _t("Patterns in the company's results over time", "أنماط نتائج الشركة عبر الزمن"),
        _t("Shows volatility, cycles and trend changes", "يوضح التقلبات والدورات وتغيرات الاتجاه"),
        _t("Supports forecasting and timing decisions", "يدعم التنبؤ وقرارات التوقيت"),
    ),
}

PROFILE_CONTEXT: Dict[str, Tuple[Bilingual, Bilingual, Bilingual]] = {
    "vertical": (
        _t(
            "Measures the relative importance of each item in financial statements and reveals the structure "
            "of assets, liabilities, revenues, and expenses",
            "يقيس الأهمية النسبية لكل بند في القوائم المالية ويكشف عن هيكل الأصول والخصوم والإيرادات والمصروفات",
        ),
        _t(
            "Helps understand the financial composition of the company and identify strengths and weaknesses "
            "in the financial structure",
            "يساعد في فهم التركيبة المالية للشركة وتحديد نقاط القوة والضعف في الهيكل المالي",
        ),
        _t(
            "Enables easy comparison between different companies and tracking changes in financial structure over time",
            "يمكّن من المقارنة السهلة بين الشركات المختلفة ومتابعة التغيرات في الهيكل المالي عبر الزمن",
        ),
    ),
    "horizontal": (
        _t(
            "Measures growth rates and changes in different financial statement items over time",
            "يقيس معدلات النمو والتغيير في بنود القوائم المالية المختلفة عبر الزمن",
        ),
        _t(
            "Reveals trends in financial performance and the pace of growth or decline in various financial indicators",
            "يكشف عن اتجاهات الأداء المالي وسرعة نمو أو انخفاض المؤشرات المالية المختلفة",
        ),
        _t(
            "Enables evaluation of historical performance and identification of potential future trends",
            "يمكّن من تقييم الأداء التاريخي وتحديد الاتجاهات المستقبلية المحتملة",
        ),
    ),
}

MESSAGES: Dict[str, Bilingual] = {
    # Comparison and position
    "comparison.similar": _t("Similar to industry average", "مماثل لمتوسط الصناعة"),
    "comparison.above": _t("Above industry average by {difference}%", "أعلى من متوسط الصناعة بـ {difference}%"),
    "comparison.below": _t("Below industry average by {difference}%", "أقل من متوسط الصناعة بـ {difference}%"),
    "position.superior": _t("Superior - First Quartile", "متفوق - الربع الأول"),
    "position.strong": _t("Strong - Second Quartile", "قوي - الربع الثاني"),
    "position.average": _t("Average - Second Quartile", "متوسط - الربع الثاني"),
    "position.weak": _t("Weak - Third Quartile", "ضعيف - الربع الثالث"),
    "position.very_weak": _t("Very Weak - Fourth Quartile", "ضعيف جداً - الربع الرابع"),
    # Ratio profile
    "ratio.interpretation": _t(
        "The {name} is {value}, which is {direction} the industry average of {benchmark} by {difference}%. "
        "This indicates {outlook} in this indicator.",
        "تبلغ {name} {value} وهي {direction} متوسط الصناعة {benchmark} بفارق {difference}%. "
        "هذا يشير إلى {outlook} في هذا المؤشر.",
    ),
    "ratio.direction.above": _t("above", "أعلى من"),
    "ratio.direction.below": _t("below", "أقل من"),
    "ratio.outlook.positive": _t("positive performance", "أداء إيجابي"),
    "ratio.outlook.improve": _t("a need for improvement", "الحاجة إلى التحسين"),
    "ratio.recommendation.excellent": _t(
        "Maintain excellent performance in {name} and monitor future trends",
        "الحفاظ على الأداء الممتاز في {name} ومراقبة الاتجاهات المستقبلية",
    ),
    "ratio.recommendation.poor": _t(
        "Focus needed on improving {name} through specific strategies",
        "ضرورة التركيز على تحسين {name} من خلال استراتيجيات محددة",
    ),
    "ratio.recommendation.default": _t(
        "Continue efforts to improve {name} for better performance",
        "مواصلة جهود تحسين {name} لتحقيق أداء أفضل",
    ),
    "ratio.forecast": _t(
        "Expected continuation of positive performance relative to industry",
        "توقع استمرار الأداء الإيجابي نسبة إلى الصناعة",
    ),
    "risk.liquidity": _t(
        "Poor liquidity may affect ability to meet obligations", "ضعف السيولة قد يؤثر على قدرة الوفاء بالالتزامات"
    ),
    "risk.leverage": _t("High leverage increases financial risk", "ارتفاع الرافعة المالية يزيد من المخاطر المالية"),
    "risk.profitability": _t("Weak profitability may limit future growth", "ضعف الربحية قد يحد من النمو المستقبلي"),
    "risk.activity": _t(
        "Low asset efficiency ties up working capital", "انخفاض كفاءة استخدام الأصول يحتجز رأس المال العامل"
    ),
    "risk.market": _t(
        "Market valuation may not reflect fundamentals", "قد لا يعكس التقييم السوقي الأساسيات المالية"
    ),
    "risk.cash_flow": _t(
        "Weak cash generation may pressure financing needs", "ضعف توليد النقد قد يزيد من الاحتياجات التمويلية"
    ),
    "risk.default": _t("Performance below industry benchmarks", "أداء أقل من معايير الصناعة"),
    "swot.strength": _t("Superior performance in this indicator", "أداء متفوق في هذا المؤشر"),
    "swot.weakness": _t("Weakness in this indicator", "ضعف في هذا المؤشر"),
    "swot.opportunity": _t("Improve financial performance", "تحسين الأداء المالي"),
    "swot.threat": _t("Competitive risks", "مخاطر تنافسية"),
    "strategy.ratio.corporate_performance": _t("Improve overall financial performance", "تحسين الأداء المالي العام"),
    "strategy.ratio.financing_decisions": _t("Improve financing structure", "تحسين هيكل التمويل"),
    "strategy.ratio.investment_decisions": _t("Evaluate investment opportunities", "تقييم فرص الاستثمار"),
    "strategy.ratio.valuation": _t("Review company valuation", "مراجعة تقييم الشركة"),
    "strategy.ratio.general": _t("Develop core competencies", "تطوير الكفاءات الأساسية"),
    "chart.industry_comparison": _t("Industry Comparison", "مقارنة مع متوسط الصناعة"),
    "chart.company": _t("Company", "الشركة"),
    "chart.industry_average": _t("Industry Average", "متوسط الصناعة"),
    # Vertical profile
    "vertical.interpretation": _t(
        "Vertical analysis results indicate that the company's gross profit margin is {gross_margin}% compared to "
        "the industry average of {benchmark}%. {comparison}. Current assets represent {current_assets}% of total "
        "assets, while equity represents {equity}% of total assets. Net profit margin is {net_margin}%, reflecting "
        "the company's efficiency in converting sales to net profits.",
        "تشير نتائج التحليل الرأسي إلى أن هامش الربح الإجمالي للشركة يبلغ {gross_margin}% مقارنة بمتوسط الصناعة "
        "{benchmark}%. {comparison}. نسبة الأصول الجارية تمثل {current_assets}% من إجمالي الأصول، بينما تمثل حقوق "
        "الملكية {equity}% من إجمالي الأصول. هامش صافي الربح يبلغ {net_margin}% مما يعكس كفاءة الشركة في تحويل "
        "المبيعات إلى أرباح صافية.",
    ),
    "vertical.risk.current_assets": _t(
        "Low current assets ratio may affect liquidity", "انخفاض نسبة الأصول الجارية قد يؤثر على السيولة"
    ),
    "vertical.risk.equity": _t(
        "Low equity ratio indicates high dependence on debt", "انخفاض نسبة حقوق الملكية يشير إلى اعتماد عالي على الديون"
    ),
    "vertical.risk.gross_margin": _t(
        "Low gross profit margin may affect profitability", "انخفاض هامش الربح الإجمالي قد يؤثر على الربحية"
    ),
    "vertical.forecast": _t(
        "Expected continuation of positive gross profit margin performance",
        "توقع استمرار الأداء الإيجابي في هامش الربح الإجمالي",
    ),
    "vertical.swot.strength": _t("Strong gross profit margin", "هامش ربح إجمالي قوي"),
    "vertical.swot.weakness": _t("Low equity ratio", "انخفاض نسبة حقوق الملكية"),
    "vertical.swot.opportunity": _t("Improve financial structure", "تحسين الهيكل المالي"),
    "vertical.swot.threat": _t("Margin pressures", "ضغوط على الهوامش"),
    "vertical.recommendation.excellent": _t(
        "Maintain current excellent performance and seek opportunities for further improvement",
        "الحفاظ على الأداء الممتاز الحالي والبحث عن فرص لمزيد من التحسين",
    ),
    "vertical.recommendation.poor": _t(
        "Comprehensive review of cost structure needed with focus on improving operational efficiency",
        "ضرورة مراجعة شاملة لهيكل التكاليف والتركيز على تحسين الكفاءة التشغيلية",
    ),
    "vertical.recommendation.default": _t(
        "Continue improving cost structure and monitor financial indicators regularly",
        "مواصلة تحسين هيكل التكاليف ومراقبة المؤشرات المالية بانتظام",
    ),
    "strategy.vertical.corporate_performance": _t("Monitor cost structure regularly", "مراقبة هيكل التكاليف بانتظام"),
    "strategy.vertical.financing_decisions": _t("Improve capital structure", "تحسين هيكل رأس المال"),
    "strategy.vertical.investment_decisions": _t("Evaluate asset utilization efficiency", "تقييم كفاءة استخدام الأصول"),
    "strategy.vertical.valuation": _t("Review asset valuation", "مراجعة تقييم الأصول"),
    "strategy.vertical.general": _t("Improve financial transparency", "تحسين الشفافية المالية"),
    "chart.asset_structure": _t("Asset Structure", "هيكل الأصول"),
    "chart.current_assets": _t("Current Assets", "الأصول الجارية"),
    "chart.non_current_assets": _t("Non-Current Assets", "الأصول غير الجارية"),
    "chart.income_statement": _t("Income Statement Analysis", "تحليل قائمة الدخل"),
    "chart.cogs": _t("COGS", "تكلفة المبيعات"),
    "chart.gross_margin": _t("Gross Profit Margin", "هامش الربح الإجمالي"),
    # Horizontal profile
    "horizontal.interpretation": _t(
        "Horizontal analysis shows revenue growth of {revenue}% compared to the previous year, while net income "
        "grew by {net_income}%. Total assets grew by {total_assets}% and equity by {equity}%. Operating cash flow "
        "{cash_direction} by {cash_flow}%. {comparison}",
        "يظهر التحليل الأفقي نمو الإيرادات بمعدل {revenue}% مقارنة بالسنة السابقة، بينما نما صافي الربح بمعدل "
        "{net_income}%. نمت الأصول الإجمالية بمعدل {total_assets}% وحقوق الملكية بمعدل {equity}%. التدفق النقدي "
        "التشغيلي {cash_direction} بمعدل {cash_flow}%. {comparison}",
    ),
    "horizontal.cash.increased": _t("increased", "نما"),
    "horizontal.cash.decreased": _t("decreased", "انخفض"),
    "horizontal.risk.revenue": _t(
        "Revenue decline indicates market challenges", "انخفاض الإيرادات يشير إلى تحديات في السوق"
    ),
    "horizontal.risk.conversion": _t(
        "Declining efficiency in converting revenue to profits", "تراجع كفاءة تحويل الإيرادات إلى أرباح"
    ),
    "horizontal.risk.cash_flow": _t(
        "Declining operating cash flow affects liquidity", "انخفاض التدفق النقدي التشغيلي يؤثر على السيولة"
    ),
    "horizontal.forecast": _t(
        "Expected continued improvement in operational efficiency", "توقع تحسن مستمر في الكفاءة التشغيلية"
    ),
    "horizontal.swot.strength": _t("Positive revenue growth", "نمو إيجابي في الإيرادات"),
    "horizontal.swot.weakness": _t("Decline in net income", "تراجع في صافي الربح"),
    "horizontal.swot.opportunity": _t("Improve operational efficiency", "تحسين الكفاءة التشغيلية"),
    "horizontal.swot.threat": _t("Competitive market challenges", "تحديات السوق التنافسية"),
    "horizontal.recommendation.efficient": _t(
        "Continue current strategies with focus on efficiency improvement",
        "الاستمرار في تطبيق الاستراتيجيات الحالية مع التركيز على تحسين الكفاءة",
    ),
    "horizontal.recommendation.decline": _t(
        "Market strategy review needed with development of new products or services",
        "ضرورة مراجعة استراتيجية السوق وتطوير منتجات أو خدمات جديدة",
    ),
    "horizontal.recommendation.default": _t(
        "Improve cost management and focus on increasing operational efficiency",
        "تحسين إدارة التكاليف والتركيز على زيادة الكفاءة التشغيلية",
    ),
    "strategy.horizontal.corporate_performance": _t(
        "Develop sustainable growth strategies", "تطوير استراتيجيات النمو المستدام"
    ),
    "strategy.horizontal.financing_decisions": _t("Improve cash flow management", "تحسين إدارة التدفق النقدي"),
    "strategy.horizontal.investment_decisions": _t("Evaluate return on investments", "تقييم العائد على الاستثمارات"),
    "strategy.horizontal.valuation": _t("Review valuation models", "مراجعة نماذج التقييم"),
    "strategy.horizontal.general": _t("Enhance competitive capability", "تعزيز القدرة التنافسية"),
    "chart.growth_rates": _t("Growth Rates", "معدلات النمو"),
    "chart.revenue": _t("Revenue", "الإيرادات"),
    "chart.net_income": _t("Net Income", "صافي الربح"),
    "chart.total_assets": _t("Total Assets", "إجمالي الأصول"),
    "chart.equity": _t("Equity", "حقوق الملكية"),
    # Not applicable and failures
    "na.interpretation": _t(
        "The {name} could not be computed for this period because a required figure is zero or unavailable.",
        "تعذر احتساب {name} لهذه الفترة لأن أحد البنود المطلوبة يساوي صفراً أو غير متوفر",
    ),
    "na.comparison": _t("Not applicable", "غير قابل للتطبيق"),
    "na.position": _t("Not determined", "غير محدد"),
    "na.recommendation": _t("Review the underlying data for {name}", "مراجعة البيانات الأساسية لـ {name}"),
    "error.interpretation": _t("The {name} analysis failed: {error}", "فشل تحليل {name}: {error}"),
    "unit.days": _t("{value} days", "{value} يوم"),
    "unit.years": _t("{value} years", "{value} سنة"),
    # Executive summary
    "summary.analysis_type": _t(
        "Comprehensive analysis - {count} financial analysis types", "تحليل شامل - {count} نوع تحليل مالي"
    ),
    "strategy.summary.corporate_performance": _t(
        "Develop advanced financial monitoring system", "تطوير نظام مراقبة مالية متقدم"
    ),
    "strategy.summary.financing_decisions": _t("Optimize capital structure", "تحسين هيكل رأس المال الأمثل"),
    "strategy.summary.investment_decisions": _t(
        "Evaluate return on current investments", "تقييم العائد على الاستثمارات الحالية"
    ),
    "strategy.summary.valuation": _t("Review valuation models used", "مراجعة نماذج التقييم المستخدمة"),
    "strategy.summary.general": _t(
        "Enhance financial governance and transparency", "تعزيز الحوكمة المالية والشفافية"
    ),
}

STRATEGY_SECTIONS = (
    "corporate_performance",
    "financing_decisions",
    "investment_decisions",
    "valuation",
    "general",
)


class MessageCatalog:
    """Renders templates for one language."""

    def __init__(self, language: str = "en") -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language '{language}'.")
        self.language = language

    def text(self, template_id: str, **values: object) -> str:
        try:
            template = MESSAGES[template_id][self.language]
        except KeyError:
            raise KeyError(f"Unknown message template '{template_id}'.") from None
        return template.format(**values) if values else template

    def rating_label(self, rating: str) -> str:
        return RATING_LABELS[rating][self.language]

    def tier_title(self, tier: str) -> str:
        return TIER_TITLES[tier][self.language]

    def category_title(self, category: str) -> str:
        entry = CATEGORY_TITLES.get(category)
        return entry[self.language] if entry else category.replace("_", " ").title()

    def context(self, category: str, profile: str = "ratio") -> Tuple[str, str, str]:
        """(what it measures, meaning, benefits) for a profile or category."""
        parts = PROFILE_CONTEXT.get(profile) or CATEGORY_CONTEXT.get(category)
        if parts is None:
            return ("", "", "")
        return tuple(part[self.language] for part in parts)  # type: ignore[return-value]

    def strategy(self, profile: str) -> Mapping[str, str]:
        return {section: self.text(f"strategy.{profile}.{section}") for section in STRATEGY_SECTIONS}
