"""SVG 文本处理：注入 CSS class 并包装为安全 HTML。"""

from __future__ import annotations

import logging

from markupsafe import Markup

LOGGER = logging.getLogger(__name__)

CLASS_ATTR = 'class="'
SVG_OPEN_TAG = "<svg "


def inject_class(svg: str, class_: str) -> str:
    """将 class_ 写入 SVG 根元素的 class 属性。

    已有 `class="..."` 时在第一个属性值前追加；否则在第一个 `<svg ` 后插入新属性。
    这是纯文本替换，只替换一次。两者都找不到时原样返回。
    """

    if not class_:
        return svg

    if CLASS_ATTR in svg:
        return svg.replace(CLASS_ATTR, f'{CLASS_ATTR}{class_} ', 1)
    if SVG_OPEN_TAG in svg:
        return svg.replace(SVG_OPEN_TAG, f'<svg class="{class_}" ', 1)

    LOGGER.debug("未找到可注入 class 的位置，保持原样：%s", class_)
    return svg


def render_svg(svg: str, class_: str = "") -> Markup:
    """注入 class 后返回可直接插入模板的 Markup。"""

    return Markup(inject_class(svg, class_))
