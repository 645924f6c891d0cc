"""Card collection browser: the card catalogue, paging and page layout."""

from __future__ import annotations

from dataclasses import dataclass

CARDS_PER_PAGE = 8
CARDS_PER_ROW = 4
CARD_PADDING_X = 300.0
CARD_PADDING_Y = 400.0
TOP_MARGIN = 250.0
COLLECTION_SCALE = 0.8
DISPLAY_SCALE = 0.5

_SPELL_FRAME = "cards/frame_normal_fashu.png"
_MINION_FRAME = "cards/frame_normal_suicong.png"
_WEAPON_FRAME = "cards/frame_RARE_wuqi.png"

_MINION_IDS = frozenset(
    {1003, 1006, 1008, 1011, 1013, 1015, 1016, 2001, 2004, 2008, 2009, 2010, 2011, 2013, 2014}
)


def is_minion_id(card_id):
    """Whether a card id shows attack and health values in the collection."""
    return card_id in _MINION_IDS


@dataclass(frozen=True)
class CardSpec:
    """Everything needed to show one card in the collection."""

    id: int
    name: str
    description: str
    frame_path: str
    portrait_path: str
    cost: int
    attack: int = 0
    health: int = 0

    @property
    def shows_stats(self):
        """Whether attack and health are shown on the card."""
        return is_minion_id(self.id)


@dataclass(frozen=True)
class CardPlacement:
    """Where a card is drawn on the current page."""

    card: CardSpec
    x: float
    y: float
    scale: float = DISPLAY_SCALE


def _portrait(name):
    return f"cards/portraits_{name}.png"


def default_catalog():
    """Return every card of the two built-in decks, in display order."""
    rows = [
        (1001, "二段跳", "从你的牌库中抽一张流放牌", _SPELL_FRAME, "erduantiao", 1, 0, 0),
        (1002, "伊利达雷研习", "发现一张流放牌，你的下一张流放牌法力值减小（1）点",
         _SPELL_FRAME, "YiLiDaLeiYanXi", 1, 0, 0),
        (1003, "凶猛的外来者", "突袭。流放：你的下一张流放牌法力消耗减小（1）点",
         _MINION_FRAME, "XiongMengDeWaiLaiZhe", 1, 2, 1),
        (1004, "敏捷咒符", "在下个回合开始时，抽一张牌，并使其法力消耗减小（1）点",
         _SPELL_FRAME, "MinJieZhouFu", 1, 0, 0),
        (1005, "法力燃烧", "下个回合，你的对手减少两个法力值", _SPELL_FRAME, "FaLiRanShao", 1, 0, 0),
        (1006, "火色魔印奔行者", "流放：抽一张牌", _MINION_FRAME, "HuoSeMoYinBenXingZhe", 1, 1, 1),
        (1007, "邪能学说", "复制你手牌中法力值消耗最低的恶魔牌。流放：使两张恶魔牌获得+1/+1",
         _SPELL_FRAME, "XieNengXueShuo", 1, 0, 0),
        (1008, "飞行员帕奇斯",
         "战吼：将六张降落伞洗入你的牌库。降落伞的法力消耗为（0）点，可召唤一个1/1有冲锋的海盗",
         _MINION_FRAME, "FeiXingYuanPaQiSi", 1, 1, 1),
        (1009, "幽灵视觉", "抽一张牌。流放：再抽一张", _SPELL_FRAME, "YouLingShiJue", 2, 0, 0),
        (1010, "时间咒符", "在下个回合开始时，额外抽三张牌", _SPELL_FRAME, "ShiJianZhouFu", 3, 0, 0),
        (1011, "灰烬元素", "在下回合，对手抽牌后，对手会受到2点伤害",
         _MINION_FRAME, "HuiJinYuanSu", 3, 2, 4),
        (1012, "飞翼滑翔", "双方玩家抽三张牌。流放：只有你抽牌", _SPELL_FRAME, "FeiYiHuaXiang", 3, 0, 0),
        (1013, "战刃吉他", "亡语：抽一张牌（在你装备期间，每用过一张流放牌，提升此效果）",
         _WEAPON_FRAME, "RenWuXiaDao", 4, 4, 2),
        (1014, "滑翔", "将你的手牌洗入你的牌库，抽四张牌。流放：对手做出同样行为",
         _SPELL_FRAME, "HuaXiang", 4, 0, 0),
        (1015, "极限追逐者阿兰娜", "战吼：本局对战剩余时间内你的英雄在你的回合中受到的伤害会转移给敌方英雄",
         _MINION_FRAME, "JiXiangZhuiZhuZheALanNa", 5, 5, 5),
        (1016, "复仇重击", "战吼：如果你的英雄在本回合受到过伤害，获得+3/+3和突袭",
         _MINION_FRAME, "FuChouZhongJiZhe", 5, 3, 3),
        (2001, "奇迹推销员", "奇迹推销员", _MINION_FRAME, "QiJiTuiXiaoYuan", 1, 2, 2),
        (2002, "黑暗符文", "发现一张武器牌", _SPELL_FRAME, "HeiAnFuWen", 1, 0, 0),
        (2003, "冰霜打击", "对一个随从造成3点伤害，如果其死亡，发现一张武器牌",
         _SPELL_FRAME, "BingShuangDaJi", 2, 0, 0),
        (2004, "恐惧猎犬训练师", "突袭。亡语：召唤一只1/1的恐惧猎犬",
         _MINION_FRAME, "KongJuLieQuanXunLianShi", 2, 2, 2),
        (2005, "甜筒冰淇淋", "造成3点伤害，消耗3份残骸，在回合结束移回你的手牌",
         _SPELL_FRAME, "TianTongBingQiLin", 2, 0, 0),
        (2006, "采矿事故", "召唤两个2/2的白银之手新兵", _SPELL_FRAME, "CaiKuangShiGu", 2, 0, 0),
        (2007, "麦芽糖浆", "对所有敌方随从造成3点伤害", _SPELL_FRAME, "MaiYaYanJiang", 2, 0, 0),
        (2008, "彩虹裁缝", "战吼：获得突袭、圣盾", _MINION_FRAME, "CaiHongCaiFeng", 3, 3, 3),
        (2009, "戈贡佐姆", "战吼：随机召你牌库里的3个随从", _MINION_FRAME, "GeGongZuoMu", 7, 4, 4),
        (2010, "伊丽扎-刺刃", "亡语：在本局剩余时间内，你召唤的随从获得+1攻击力",
         _MINION_FRAME, "YiLiZhaCiRen", 4, 4, 3),
        (2011, "大地之末号", "战吼，亡语：造成5点伤害，随机分配到敌人身上",
         _MINION_FRAME, "DaDiZhiMoHao", 4, 0, 5),
        (2012, "食尸鬼之夜", "召唤5个1/1的食尸鬼并随即攻击敌人", _SPELL_FRAME, "ShiShiGuiZhiYe", 5, 0, 0),
        (2013, "奇利亚斯豪华版3000型", "圣盾，嘲讽，剧毒，突袭。战吼：召唤一个本随从的复制",
         _MINION_FRAME, "QiLiYaSiHaoHuaBan3000Xing", 9, 6, 5),
        (2014, "矿坑老板雷斯卡",
         "突袭。在本局中每有一个随从死亡本牌法力消耗减少（1）点。亡语：随机夺取一个敌人的控制权",
         _MINION_FRAME, "KuangKengLaoBanLeiSiKa", 25, 6, 3),
    ]
    return [
        CardSpec(card_id, name, text, frame, _portrait(portrait), cost, attack, health)
        for card_id, name, text, frame, portrait, cost, attack, health in rows
    ]


class DeckBuilder:
    """Pages through a card collection, eight cards to a page."""

    def __init__(self, cards=None, visible_width=1920.0, visible_height=1080.0):
        self.cards = tuple(default_catalog() if cards is None else cards)
        self.visible_width = float(visible_width)
        self.visible_height = float(visible_height)
        self.page = 0

    def total_pages(self):
        """Number of pages; an empty collection still has one."""
        if not self.cards:
            return 1
        return (len(self.cards) + CARDS_PER_PAGE - 1) // CARDS_PER_PAGE

    def page_right(self):
        """Go to the next page if there is one; return whether the page changed."""
        if not self.cards or self.page >= self.total_pages() - 1:
            return False
        self.page += 1
        return True

    def page_left(self):
        """Go to the previous page if there is one; return whether the page changed."""
        if self.page <= 0:
            return False
        self.page -= 1
        return True

    def current_cards(self):
        """The cards shown on the current page."""
        start = self.page * CARDS_PER_PAGE
        return list(self.cards[start:start + CARDS_PER_PAGE])

    def layout(self):
        """Positions of the cards on the current page, four to a row."""
        start_x = self.visible_width / 2 - (CARDS_PER_ROW - 1) * CARD_PADDING_X / 2
        start_y = self.visible_height - TOP_MARGIN
        placements = []
        for offset, card in enumerate(self.current_cards()):
            row, col = divmod(offset, CARDS_PER_ROW)
            placements.append(
                CardPlacement(
                    card=card,
                    x=start_x + col * CARD_PADDING_X,
                    y=start_y - row * CARD_PADDING_Y,
                )
            )
        return placements

    def page_label(self):
        """Text of the page indicator."""
        return f"Page {self.page + 1}/{self.total_pages()}"