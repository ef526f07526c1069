"""
WHO / CDC growth reference tables (LMS parameters).

WHO Child Growth Standards (MGRS, 2006): monthly rows 0-60 months. Rows 0-23
are the recumbent length tables, rows 24-60 the standing height tables.
CDC 2000 Growth Charts: whole-year rows, 24-240 months.
WHO weight-for-length: coarse 10 cm rows, 50-110 cm.

Raw tables are {key: (L, M, S)}; the store exposes them as immutable tuples
of ReferencePoint / WeightForLengthPoint.
"""
import logging
from typing import Dict, Tuple

from growth_engine.models.data_structures import (
    Metric, Sex, Standard, ReferencePoint, WeightForLengthPoint
)
from growth_engine.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

# =============================================================================
# WHO LMS Reference Tables
# =============================================================================

WHO_LMS_TABLES = {
    Metric.WEIGHT: {
        Sex.MALE: {
            0: (0.3487, 3.3464, 0.14602), 1: (0.2297, 4.4709, 0.13395),
            2: (0.1970, 5.5675, 0.12385), 3: (0.1738, 6.3762, 0.11727),
            4: (0.1553, 7.0023, 0.11316), 5: (0.1395, 7.5105, 0.11080),
            6: (0.1257, 7.9340, 0.10958), 7: (0.1134, 8.2970, 0.10902),
            8: (0.1021, 8.6151, 0.10882), 9: (0.0917, 8.9014, 0.10881),
            10: (0.0820, 9.1649, 0.10891), 11: (0.0730, 9.4122, 0.10906),
            12: (0.0644, 9.6479, 0.10925), 13: (0.0563, 9.8749, 0.10949),
            14: (0.0487, 10.0953, 0.10976), 15: (0.0413, 10.3108, 0.11007),
            16: (0.0343, 10.5228, 0.11041), 17: (0.0275, 10.7319, 0.11079),
            18: (0.0211, 10.9385, 0.11119), 19: (0.0148, 11.1430, 0.11164),
            20: (0.0087, 11.3462, 0.11211), 21: (0.0029, 11.5486, 0.11261),
            22: (-0.0028, 11.7504, 0.11314), 23: (-0.0083, 11.9514, 0.11369),
            24: (-0.0137, 12.1515, 0.11426), 25: (-0.0189, 12.3502, 0.11485),
            26: (-0.0240, 12.5466, 0.11544), 27: (-0.0289, 12.7401, 0.11604),
            28: (-0.0337, 12.9303, 0.11664), 29: (-0.0385, 13.1169, 0.11723),
            30: (-0.0431, 13.3000, 0.11781), 31: (-0.0476, 13.4798, 0.11839),
            32: (-0.0520, 13.6567, 0.11896), 33: (-0.0564, 13.8309, 0.11953),
            34: (-0.0606, 14.0031, 0.12008), 35: (-0.0648, 14.1736, 0.12062),
            36: (-0.0689, 14.3429, 0.12116), 37: (-0.0729, 14.5113, 0.12168),
            38: (-0.0769, 14.6791, 0.12220), 39: (-0.0808, 14.8466, 0.12271),
            40: (-0.0846, 15.0140, 0.12322), 41: (-0.0883, 15.1813, 0.12373),
            42: (-0.0920, 15.3486, 0.12425), 43: (-0.0957, 15.5158, 0.12478),
            44: (-0.0993, 15.6828, 0.12531), 45: (-0.1028, 15.8497, 0.12586),
            46: (-0.1063, 16.0163, 0.12643), 47: (-0.1097, 16.1827, 0.12700),
            48: (-0.1131, 16.3489, 0.12759), 49: (-0.1165, 16.5150, 0.12819),
            50: (-0.1198, 16.6811, 0.12880), 51: (-0.1230, 16.8471, 0.12943),
            52: (-0.1262, 17.0132, 0.13005), 53: (-0.1294, 17.1792, 0.13069),
            54: (-0.1325, 17.3452, 0.13133), 55: (-0.1356, 17.5111, 0.13197),
            56: (-0.1387, 17.6768, 0.13261), 57: (-0.1417, 17.8422, 0.13325),
            58: (-0.1447, 18.0073, 0.13389), 59: (-0.1477, 18.1722, 0.13453),
            60: (-0.1506, 18.3366, 0.13517),
        },
        Sex.FEMALE: {
            0: (0.3809, 3.2322, 0.14171), 1: (0.1714, 4.1873, 0.13724),
            2: (0.0962, 5.1282, 0.13000), 3: (0.0402, 5.8458, 0.12619),
            4: (-0.0050, 6.4237, 0.12402), 5: (-0.0430, 6.8985, 0.12274),
            6: (-0.0756, 7.2970, 0.12204), 7: (-0.1039, 7.6422, 0.12178),
            8: (-0.1288, 7.9487, 0.12181), 9: (-0.1507, 8.2254, 0.12199),
            10: (-0.1700, 8.4800, 0.12223), 11: (-0.1872, 8.7192, 0.12247),
            12: (-0.2024, 8.9481, 0.12268), 13: (-0.2158, 9.1699, 0.12283),
            14: (-0.2278, 9.3870, 0.12294), 15: (-0.2384, 9.6008, 0.12299),
            16: (-0.2478, 9.8124, 0.12303), 17: (-0.2562, 10.0226, 0.12306),
            18: (-0.2637, 10.2315, 0.12309), 19: (-0.2703, 10.4393, 0.12315),
            20: (-0.2762, 10.6464, 0.12323), 21: (-0.2815, 10.8534, 0.12335),
            22: (-0.2862, 11.0608, 0.12350), 23: (-0.2903, 11.2688, 0.12369),
            24: (-0.2941, 11.4775, 0.12390), 25: (-0.2975, 11.6864, 0.12414),
            26: (-0.3005, 11.8947, 0.12441), 27: (-0.3032, 12.1015, 0.12472),
            28: (-0.3057, 12.3059, 0.12506), 29: (-0.3080, 12.5073, 0.12545),
            30: (-0.3101, 12.7055, 0.12587), 31: (-0.3120, 12.9006, 0.12633),
            32: (-0.3138, 13.0930, 0.12683), 33: (-0.3155, 13.2837, 0.12737),
            34: (-0.3171, 13.4731, 0.12794), 35: (-0.3186, 13.6618, 0.12855),
            36: (-0.3201, 13.8503, 0.12919), 37: (-0.3216, 14.0385, 0.12988),
            38: (-0.3230, 14.2265, 0.13059), 39: (-0.3243, 14.4140, 0.13135),
            40: (-0.3257, 14.6010, 0.13213), 41: (-0.3270, 14.7873, 0.13293),
            42: (-0.3283, 14.9727, 0.13376), 43: (-0.3296, 15.1573, 0.13460),
            44: (-0.3309, 15.3410, 0.13545), 45: (-0.3322, 15.5240, 0.13630),
            46: (-0.3335, 15.7064, 0.13716), 47: (-0.3348, 15.8882, 0.13800),
            48: (-0.3361, 16.0697, 0.13884), 49: (-0.3374, 16.2511, 0.13968),
            50: (-0.3387, 16.4322, 0.14051), 51: (-0.3400, 16.6133, 0.14132),
            52: (-0.3414, 16.7942, 0.14213), 53: (-0.3427, 16.9748, 0.14293),
            54: (-0.3440, 17.1551, 0.14371), 55: (-0.3453, 17.3347, 0.14448),
            56: (-0.3466, 17.5136, 0.14525), 57: (-0.3479, 17.6916, 0.14600),
            58: (-0.3492, 17.8686, 0.14675), 59: (-0.3505, 18.0445, 0.14748),
            60: (-0.3518, 18.2193, 0.14821),
        },
    },
    Metric.HEIGHT: {
        Sex.MALE: {
            0: (1.0, 49.8842, 0.03795), 1: (1.0, 54.7244, 0.03557),
            2: (1.0, 58.4249, 0.03424), 3: (1.0, 61.4292, 0.03328),
            4: (1.0, 63.8860, 0.03257), 5: (1.0, 65.9026, 0.03204),
            6: (1.0, 67.6236, 0.03165), 7: (1.0, 69.1645, 0.03139),
            8: (1.0, 70.5994, 0.03124), 9: (1.0, 71.9687, 0.03117),
            10: (1.0, 73.2812, 0.03118), 11: (1.0, 74.5388, 0.03125),
            12: (1.0, 75.7488, 0.03137), 13: (1.0, 76.9186, 0.03154),
            14: (1.0, 78.0497, 0.03174), 15: (1.0, 79.1458, 0.03197),
            16: (1.0, 80.2113, 0.03222), 17: (1.0, 81.2487, 0.03250),
            18: (1.0, 82.2587, 0.03279), 19: (1.0, 83.2418, 0.03310),
            20: (1.0, 84.1996, 0.03342), 21: (1.0, 85.1348, 0.03376),
            22: (1.0, 86.0477, 0.03410), 23: (1.0, 86.9410, 0.03445),
            24: (1.0, 87.1161, 0.03507), 25: (1.0, 87.9720, 0.03542),
            26: (1.0, 88.8065, 0.03576), 27: (1.0, 89.6197, 0.03610),
            28: (1.0, 90.4120, 0.03642), 29: (1.0, 91.1828, 0.03674),
            30: (1.0, 91.9327, 0.03704), 31: (1.0, 92.6631, 0.03733),
            32: (1.0, 93.3753, 0.03761), 33: (1.0, 94.0711, 0.03787),
            34: (1.0, 94.7532, 0.03812), 35: (1.0, 95.4236, 0.03836),
            36: (1.0, 96.0835, 0.03858), 37: (1.0, 96.7337, 0.03880),
            38: (1.0, 97.3749, 0.03900), 39: (1.0, 98.0073, 0.03919),
            40: (1.0, 98.6310, 0.03937), 41: (1.0, 99.2459, 0.03954),
            42: (1.0, 99.8515, 0.03971), 43: (1.0, 100.4485, 0.03986),
            44: (1.0, 101.0374, 0.04002), 45: (1.0, 101.6186, 0.04016),
            46: (1.0, 102.1933, 0.04031), 47: (1.0, 102.7625, 0.04045),
            48: (1.0, 103.3273, 0.04059), 49: (1.0, 103.8886, 0.04073),
            50: (1.0, 104.4473, 0.04086), 51: (1.0, 105.0041, 0.04100),
            52: (1.0, 105.5596, 0.04113), 53: (1.0, 106.1138, 0.04126),
            54: (1.0, 106.6668, 0.04139), 55: (1.0, 107.2188, 0.04152),
            56: (1.0, 107.7697, 0.04165), 57: (1.0, 108.3198, 0.04177),
            58: (1.0, 108.8686, 0.04190), 59: (1.0, 109.4164, 0.04202),
            60: (1.0, 109.9638, 0.04214),
        },
        Sex.FEMALE: {
            0: (1.0, 49.1477, 0.03790), 1: (1.0, 53.6872, 0.03640),
            2: (1.0, 57.0673, 0.03568), 3: (1.0, 59.8029, 0.03520),
            4: (1.0, 62.0899, 0.03486), 5: (1.0, 64.0301, 0.03463),
            6: (1.0, 65.7311, 0.03448), 7: (1.0, 67.2873, 0.03441),
            8: (1.0, 68.7498, 0.03440), 9: (1.0, 70.1435, 0.03444),
            10: (1.0, 71.4818, 0.03452), 11: (1.0, 72.7710, 0.03464),
            12: (1.0, 74.0150, 0.03479), 13: (1.0, 75.2176, 0.03496),
            14: (1.0, 76.3817, 0.03514), 15: (1.0, 77.5099, 0.03534),
            16: (1.0, 78.6055, 0.03555), 17: (1.0, 79.6710, 0.03576),
            18: (1.0, 80.7079, 0.03598), 19: (1.0, 81.7182, 0.03620),
            20: (1.0, 82.7036, 0.03643), 21: (1.0, 83.6654, 0.03666),
            22: (1.0, 84.6040, 0.03688), 23: (1.0, 85.5202, 0.03711),
            24: (1.0, 85.7153, 0.03764), 25: (1.0, 86.5904, 0.03786),
            26: (1.0, 87.4462, 0.03808), 27: (1.0, 88.2830, 0.03829),
            28: (1.0, 89.1004, 0.03851), 29: (1.0, 89.8991, 0.03872),
            30: (1.0, 90.6797, 0.03893), 31: (1.0, 91.4430, 0.03913),
            32: (1.0, 92.1906, 0.03933), 33: (1.0, 92.9239, 0.03952),
            34: (1.0, 93.6444, 0.03971), 35: (1.0, 94.3533, 0.03989),
            36: (1.0, 95.0515, 0.04006), 37: (1.0, 95.7399, 0.04024),
            38: (1.0, 96.4187, 0.04041), 39: (1.0, 97.0885, 0.04057),
            40: (1.0, 97.7493, 0.04073), 41: (1.0, 98.4015, 0.04089),
            42: (1.0, 99.0448, 0.04105), 43: (1.0, 99.6795, 0.04120),
            44: (1.0, 100.3058, 0.04135), 45: (1.0, 100.9238, 0.04150),
            46: (1.0, 101.5337, 0.04164), 47: (1.0, 102.1360, 0.04179),
            48: (1.0, 102.7312, 0.04193), 49: (1.0, 103.3197, 0.04206),
            50: (1.0, 103.9021, 0.04220), 51: (1.0, 104.4786, 0.04233),
            52: (1.0, 105.0494, 0.04246), 53: (1.0, 105.6148, 0.04259),
            54: (1.0, 106.1748, 0.04272), 55: (1.0, 106.7295, 0.04285),
            56: (1.0, 107.2788, 0.04298), 57: (1.0, 107.8227, 0.04310),
            58: (1.0, 108.3613, 0.04322), 59: (1.0, 108.8948, 0.04334),
            60: (1.0, 109.4233, 0.04347),
        },
    },
    Metric.BMI: {
        Sex.MALE: {
            0: (-0.3053, 13.4069, 0.09560), 1: (0.2708, 14.9441, 0.09027),
            2: (0.1118, 16.3195, 0.08677), 3: (0.0068, 16.8987, 0.08495),
            4: (-0.0727, 17.1579, 0.08378), 5: (-0.1370, 17.2919, 0.08296),
            6: (-0.1913, 17.3422, 0.08234), 7: (-0.2385, 17.3288, 0.08183),
            8: (-0.2802, 17.2647, 0.08140), 9: (-0.3176, 17.1662, 0.08102),
            10: (-0.3516, 17.0488, 0.08068), 11: (-0.3828, 16.9239, 0.08037),
            12: (-0.4115, 16.7981, 0.08009), 13: (-0.4382, 16.6743, 0.07982),
            14: (-0.4630, 16.5548, 0.07958), 15: (-0.4863, 16.4409, 0.07935),
            16: (-0.5082, 16.3335, 0.07913), 17: (-0.5289, 16.2329, 0.07892),
            18: (-0.5484, 16.1392, 0.07873), 19: (-0.5669, 16.0528, 0.07854),
            20: (-0.5846, 15.9743, 0.07836), 21: (-0.6014, 15.9039, 0.07818),
            22: (-0.6174, 15.8412, 0.07802), 23: (-0.6328, 15.7852, 0.07786),
            24: (-0.6187, 16.0189, 0.07785), 25: (-0.5840, 15.9800, 0.07792),
            26: (-0.5497, 15.9414, 0.07800), 27: (-0.5166, 15.9036, 0.07808),
            28: (-0.4850, 15.8667, 0.07818), 29: (-0.4552, 15.8306, 0.07829),
            30: (-0.4274, 15.7953, 0.07841), 31: (-0.4016, 15.7606, 0.07854),
            32: (-0.3778, 15.7267, 0.07867), 33: (-0.3560, 15.6934, 0.07882),
            34: (-0.3362, 15.6610, 0.07897), 35: (-0.3183, 15.6294, 0.07914),
            36: (-0.3024, 15.5988, 0.07931), 37: (-0.2882, 15.5693, 0.07950),
            38: (-0.2758, 15.5410, 0.07969), 39: (-0.2651, 15.5140, 0.07990),
            40: (-0.2559, 15.4885, 0.08012), 41: (-0.2481, 15.4645, 0.08036),
            42: (-0.2417, 15.4420, 0.08061), 43: (-0.2365, 15.4210, 0.08087),
            44: (-0.2324, 15.4013, 0.08115), 45: (-0.2293, 15.3827, 0.08144),
            46: (-0.2272, 15.3652, 0.08174), 47: (-0.2259, 15.3485, 0.08205),
            48: (-0.2255, 15.3326, 0.08238), 49: (-0.2258, 15.3174, 0.08272),
            50: (-0.2268, 15.3029, 0.08307), 51: (-0.2285, 15.2891, 0.08343),
            52: (-0.2308, 15.2759, 0.08380), 53: (-0.2338, 15.2633, 0.08418),
            54: (-0.2372, 15.2514, 0.08457), 55: (-0.2412, 15.2400, 0.08496),
            56: (-0.2457, 15.2291, 0.08536), 57: (-0.2506, 15.2188, 0.08577),
            58: (-0.2560, 15.2091, 0.08617), 59: (-0.2617, 15.2001, 0.08659),
            60: (-0.2679, 15.1916, 0.08700),
        },
        Sex.FEMALE: {
            0: (-0.0631, 13.3363, 0.09272), 1: (0.3448, 14.5679, 0.09556),
            2: (0.1749, 15.7679, 0.09371), 3: (0.0643, 16.3574, 0.09254),
            4: (-0.0191, 16.6703, 0.09166), 5: (-0.0864, 16.8386, 0.09096),
            6: (-0.1429, 16.9083, 0.09036), 7: (-0.1916, 16.9020, 0.08984),
            8: (-0.2344, 16.8404, 0.08939), 9: (-0.2725, 16.7406, 0.08898),
            10: (-0.3068, 16.6184, 0.08861), 11: (-0.3381, 16.4875, 0.08828),
            12: (-0.3667, 16.3568, 0.08797), 13: (-0.3932, 16.2311, 0.08768),
            14: (-0.4177, 16.1128, 0.08741), 15: (-0.4407, 16.0028, 0.08716),
            16: (-0.4623, 15.9017, 0.08693), 17: (-0.4825, 15.8096, 0.08671),
            18: (-0.5017, 15.7263, 0.08650), 19: (-0.5199, 15.6517, 0.08630),
            20: (-0.5372, 15.5855, 0.08612), 21: (-0.5537, 15.5278, 0.08594),
            22: (-0.5695, 15.4787, 0.08577), 23: (-0.5846, 15.4380, 0.08560),
            24: (-0.5684, 15.6881, 0.08454), 25: (-0.5684, 15.6590, 0.08452),
            26: (-0.5684, 15.6308, 0.08449), 27: (-0.5684, 15.6037, 0.08446),
            28: (-0.5684, 15.5777, 0.08444), 29: (-0.5684, 15.5523, 0.08443),
            30: (-0.5684, 15.5276, 0.08444), 31: (-0.5684, 15.5034, 0.08448),
            32: (-0.5684, 15.4798, 0.08455), 33: (-0.5684, 15.4572, 0.08467),
            34: (-0.5684, 15.4356, 0.08484), 35: (-0.5684, 15.4155, 0.08506),
            36: (-0.5684, 15.3968, 0.08535), 37: (-0.5684, 15.3796, 0.08569),
            38: (-0.5684, 15.3638, 0.08609), 39: (-0.5684, 15.3493, 0.08654),
            40: (-0.5684, 15.3358, 0.08704), 41: (-0.5684, 15.3233, 0.08757),
            42: (-0.5684, 15.3116, 0.08813), 43: (-0.5684, 15.3007, 0.08872),
            44: (-0.5684, 15.2905, 0.08931), 45: (-0.5684, 15.2814, 0.08991),
            46: (-0.5684, 15.2732, 0.09051), 47: (-0.5684, 15.2661, 0.09110),
            48: (-0.5684, 15.2602, 0.09168), 49: (-0.5684, 15.2556, 0.09227),
            50: (-0.5684, 15.2523, 0.09286), 51: (-0.5684, 15.2503, 0.09345),
            52: (-0.5684, 15.2496, 0.09403), 53: (-0.5684, 15.2502, 0.09461),
            54: (-0.5684, 15.2519, 0.09519), 55: (-0.5684, 15.2544, 0.09577),
            56: (-0.5684, 15.2575, 0.09634), 57: (-0.5684, 15.2612, 0.09692),
            58: (-0.5684, 15.2653, 0.09750), 59: (-0.5684, 15.2698, 0.09808),
            60: (-0.5684, 15.2747, 0.09867),
        },
    },
}

# =============================================================================
# CDC 2000 LMS Reference Tables (whole years, 2-20 y)
# =============================================================================

CDC_LMS_TABLES = {
    Metric.WEIGHT: {
        Sex.MALE: {
            24: (-0.4242, 12.59, 0.1139), 36: (-0.4669, 14.34, 0.1198),
            48: (-0.5614, 16.33, 0.1307), 60: (-0.7159, 18.62, 0.1441),
            72: (-0.8876, 20.93, 0.1555), 84: (-1.0100, 23.39, 0.1644),
            96: (-1.0682, 25.94, 0.1722), 108: (-1.0708, 28.58, 0.1803),
            120: (-1.0240, 31.44, 0.1893), 132: (-0.9476, 34.77, 0.1979),
            144: (-0.8693, 38.91, 0.2044), 156: (-0.8237, 43.87, 0.2082),
            168: (-0.8247, 49.49, 0.2091), 180: (-0.8659, 55.38, 0.2070),
            192: (-0.9402, 60.98, 0.2016), 204: (-1.0346, 65.89, 0.1934),
            216: (-1.1413, 70.11, 0.1837), 228: (-1.2545, 73.71, 0.1737),
            240: (-1.3686, 76.78, 0.1642),
        },
        Sex.FEMALE: {
            24: (-0.3523, 11.91, 0.1202), 36: (-0.3964, 13.86, 0.1294),
            48: (-0.4995, 16.06, 0.1411), 60: (-0.6602, 18.48, 0.1522),
            72: (-0.8193, 20.93, 0.1612), 84: (-0.9386, 23.53, 0.1691),
            96: (-0.9953, 26.31, 0.1774), 108: (-0.9883, 29.34, 0.1868),
            120: (-0.9237, 32.78, 0.1970), 132: (-0.8150, 36.90, 0.2068),
            144: (-0.6885, 41.74, 0.2141), 156: (-0.5772, 47.00, 0.2173),
            168: (-0.5079, 52.11, 0.2163), 180: (-0.4868, 56.56, 0.2116),
            192: (-0.5076, 60.08, 0.2042), 204: (-0.5573, 62.68, 0.1954),
            216: (-0.6252, 64.52, 0.1865), 228: (-0.7040, 65.81, 0.1784),
            240: (-0.7893, 66.75, 0.1714),
        },
    },
    Metric.HEIGHT: {
        Sex.MALE: {
            24: (-0.0554, 87.78, 0.0363), 36: (0.1957, 96.10, 0.0393),
            48: (0.2708, 102.9, 0.0417), 60: (0.2204, 109.2, 0.0432),
            72: (0.1080, 115.1, 0.0445), 84: (-0.0168, 120.8, 0.0457),
            96: (-0.1368, 126.2, 0.0468), 108: (-0.2427, 131.5, 0.0479),
            120: (-0.3254, 136.8, 0.0490), 132: (-0.3816, 142.4, 0.0500),
            144: (-0.4097, 148.7, 0.0505), 156: (-0.4134, 155.5, 0.0502),
            168: (-0.3994, 162.2, 0.0489), 180: (-0.3757, 168.1, 0.0465),
            192: (-0.3502, 172.7, 0.0437), 204: (-0.3295, 175.8, 0.0412),
            216: (-0.3173, 177.6, 0.0396), 228: (-0.3134, 178.6, 0.0386),
            240: (-0.3155, 179.1, 0.0382),
        },
        Sex.FEMALE: {
            24: (-0.2046, 86.40, 0.0362), 36: (0.0047, 94.86, 0.0399),
            48: (0.0884, 101.8, 0.0428), 60: (0.0696, 108.4, 0.0449),
            72: (-0.0049, 114.6, 0.0467), 84: (-0.0919, 120.6, 0.0484),
            96: (-0.1759, 126.4, 0.0502), 108: (-0.2483, 132.0, 0.0519),
            120: (-0.3033, 137.5, 0.0537), 132: (-0.3380, 143.3, 0.0553),
            144: (-0.3547, 149.4, 0.0560), 156: (-0.3600, 155.0, 0.0556),
            168: (-0.3607, 159.5, 0.0540), 180: (-0.3608, 162.5, 0.0518),
            192: (-0.3616, 164.2, 0.0498), 204: (-0.3632, 165.0, 0.0484),
            216: (-0.3655, 165.4, 0.0477), 228: (-0.3684, 165.6, 0.0474),
            240: (-0.3718, 165.7, 0.0473),
        },
    },
    Metric.BMI: {
        Sex.MALE: {
            24: (-0.7766, 16.42, 0.0861), 36: (-1.2236, 15.79, 0.0823),
            48: (-1.4997, 15.48, 0.0839), 60: (-1.6315, 15.34, 0.0885),
            72: (-1.6623, 15.32, 0.0950), 84: (-1.6293, 15.44, 0.1024),
            96: (-1.5635, 15.72, 0.1102), 108: (-1.4867, 16.15, 0.1178),
            120: (-1.4143, 16.72, 0.1250), 132: (-1.3563, 17.44, 0.1311),
            144: (-1.3159, 18.30, 0.1360), 156: (-1.2932, 19.27, 0.1394),
            168: (-1.2865, 20.29, 0.1413), 180: (-1.2926, 21.29, 0.1417),
            192: (-1.3074, 22.21, 0.1407), 204: (-1.3268, 23.02, 0.1388),
            216: (-1.3467, 23.69, 0.1364), 228: (-1.3651, 24.22, 0.1339),
            240: (-1.3815, 24.63, 0.1317),
        },
        Sex.FEMALE: {
            24: (-0.6075, 16.13, 0.0917), 36: (-0.9803, 15.58, 0.0890),
            48: (-1.1963, 15.29, 0.0903), 60: (-1.2959, 15.17, 0.0942),
            72: (-1.3224, 15.17, 0.0997), 84: (-1.3064, 15.32, 0.1063),
            96: (-1.2716, 15.59, 0.1132), 108: (-1.2353, 16.00, 0.1200),
            120: (-1.2062, 16.53, 0.1264), 132: (-1.1882, 17.20, 0.1319),
            144: (-1.1814, 18.00, 0.1361), 156: (-1.1839, 18.88, 0.1389),
            168: (-1.1929, 19.79, 0.1401), 180: (-1.2053, 20.66, 0.1399),
            192: (-1.2183, 21.43, 0.1388), 204: (-1.2301, 22.07, 0.1373),
            216: (-1.2399, 22.56, 0.1358), 228: (-1.2475, 22.93, 0.1346),
            240: (-1.2531, 23.20, 0.1338),
        },
    },
}

# =============================================================================
# WHO Weight-for-Length (kg by cm), used for ideal body weight only
# =============================================================================

WHO_WFL_TABLES = {
    Sex.MALE: {
        50: (0.3, 3.4, 0.10), 60: (0.1, 5.8, 0.09), 70: (0.0, 8.5, 0.08),
        80: (-0.1, 10.9, 0.08), 90: (-0.2, 13.2, 0.08),
        100: (-0.3, 15.8, 0.08), 110: (-0.4, 18.7, 0.09),
    },
    Sex.FEMALE: {
        50: (0.3, 3.4, 0.10), 60: (0.1, 5.5, 0.09), 70: (0.0, 7.9, 0.08),
        80: (-0.1, 10.4, 0.08), 90: (-0.2, 12.8, 0.08),
        100: (-0.3, 15.4, 0.08), 110: (-0.4, 18.2, 0.09),
    },
}


AgeTable = Tuple[ReferencePoint, ...]
LengthTable = Tuple[WeightForLengthPoint, ...]


def _age_points(table: dict) -> AgeTable:
    return tuple(
        ReferencePoint(float(age), *lms) for age, lms in sorted(table.items())
    )


def _length_points(table: dict) -> LengthTable:
    return tuple(
        WeightForLengthPoint(float(length), *lms)
        for length, lms in sorted(table.items())
    )


class ReferenceTableStore:
    """Read-only WHO/CDC LMS tables keyed by (standard, metric, sex)."""

    def __init__(self, who_tables: dict = None, cdc_tables: dict = None,
                 wfl_tables: dict = None):
        who_tables = WHO_LMS_TABLES if who_tables is None else who_tables
        cdc_tables = CDC_LMS_TABLES if cdc_tables is None else cdc_tables
        wfl_tables = WHO_WFL_TABLES if wfl_tables is None else wfl_tables

        self._tables: Dict[Tuple[Standard, Metric, Sex], AgeTable] = {}
        for standard, source in ((Standard.WHO, who_tables),
                                 (Standard.CDC, cdc_tables)):
            for metric, by_sex in source.items():
                for sex, table in by_sex.items():
                    self._tables[(standard, Metric(metric), Sex(sex))] = \
                        _age_points(table)
        self._wfl: Dict[Sex, LengthTable] = {
            Sex(sex): _length_points(table) for sex, table in wfl_tables.items()
        }

    def table(self, standard: Standard, metric: Metric, sex: Sex) -> AgeTable:
        try:
            return self._tables[(standard, metric, sex)]
        except KeyError:
            raise ConfigurationError(
                f"No {standard.value} reference table for {metric.value}/{sex.value}"
            ) from None

    def weight_for_length(self, sex: Sex) -> LengthTable:
        try:
            return self._wfl[sex]
        except KeyError:
            raise ConfigurationError(
                f"No weight-for-length reference table for {sex.value}"
            ) from None

    @property
    def available(self) -> list:
        return sorted(
            f"{std.value}:{metric.value}:{sex.value}"
            for std, metric, sex in self._tables
        )

    def validate(self) -> None:
        """
        Check that every (standard, metric, sex) table exists and is sane.

        Raises:
            ConfigurationError: on a missing or empty table, keys that are not
                strictly increasing, or a non-positive M or S.
        """
        for standard in Standard:
            for metric in Metric:
                for sex in Sex:
                    _check_rows(
                        f"{standard.value}:{metric.value}:{sex.value}",
                        self.table(standard, metric, sex),
                        key="age_months",
                    )
        for sex in Sex:
            _check_rows(f"WFL:{sex.value}", self.weight_for_length(sex),
                        key="length_cm")
        logger.debug("Validated %d reference tables", len(self._tables) + len(self._wfl))


def _check_rows(name: str, rows, key: str) -> None:
    if not rows:
        raise ConfigurationError(f"Reference table {name} is empty")
    previous = None
    for row in rows:
        k = getattr(row, key)
        if previous is not None and k <= previous:
            raise ConfigurationError(
                f"Reference table {name}: {key} not strictly increasing at {k}"
            )
        if row.M <= 0 or row.S <= 0:
            raise ConfigurationError(
                f"Reference table {name}: non-positive M or S at {key}={k}"
            )
        previous = k
