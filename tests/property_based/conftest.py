"""
Shared Hypothesis strategies for property-based testing across tabstat.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成等宽整数表格（单元格随机以整数或其字符串形式出现）
# - numeric_cells：大整数与有限浮点数单元格，用于聚合往返性质
# - 生成合法的列号与带变换的字段访问器
# - 生成以第 1 列为键的表，用于连接（join）性质测试

from hypothesis import strategies as st

from tabstat.core.data.accessors import FieldAccessor

_TRANSFORMS = [
    lambda x: x,
    lambda x: x * 2,
    lambda x: x - 3,
    lambda x: -x,
]


# ------------------------------------------------------------------ Cells & Tables
@st.composite
def cells(draw, min_value=-1000, max_value=1000):
    # 整数单元格，有一定概率以字符串形式出现，用于覆盖强制转换路径
    value = draw(st.integers(min_value=min_value, max_value=max_value))
    return draw(st.sampled_from([value, str(value)]))


@st.composite
def numeric_cells(draw):
    # 大整数与有限浮点数，同样可能以字符串形式出现
    value = draw(
        st.one_of(
            st.integers(min_value=-(2 ** 80), max_value=2 ** 80),
            st.floats(allow_nan=False, allow_infinity=False),
        )
    )
    return draw(st.sampled_from([value, repr(value)]))


@st.composite
def tables(draw, min_rows=0, max_rows=20, min_cols=1, max_cols=5, cell_strategy=None):
    # 构建行长度一致的表格；默认使用小整数单元格
    width = draw(st.integers(min_value=min_cols, max_value=max_cols))
    element = cells() if cell_strategy is None else cell_strategy
    return draw(
        st.lists(
            st.lists(element, min_size=width, max_size=width),
            min_size=min_rows,
            max_size=max_rows,
        )
    )


@st.composite
def keyed_tables(draw):
    # 第 1 列为小范围整数键，便于产生重复匹配
    rows = draw(st.lists(st.tuples(st.integers(0, 5), st.integers(-100, 100)), max_size=12))
    return [list(row) for row in rows]


# ------------------------------------------------------------------ Accessors
@st.composite
def accessors(draw, max_index=5):
    index = draw(st.integers(min_value=1, max_value=max_index))
    transform = draw(st.sampled_from(_TRANSFORMS))
    return FieldAccessor(index, transform)


@st.composite
def offsets(draw):
    return draw(st.integers(min_value=0, max_value=10))
