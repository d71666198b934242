# =============================================================================
# SKIN PROPOSAL BACKEND - TREATMENT CATALOG
# =============================================================================
"""
Fixed catalog of clinic treatments offered in proposals.
The CSV text is embedded verbatim in the generation prompt.
"""

from functools import lru_cache
from typing import Optional

from models import Treatment

# Category, treatment name, description, price (JPY)
TREATMENTS_CSV = """\
カテゴリ,治療法名,特徴,価格（円）
しわ,ボトックス,表情ジワの改善に即効性あり,20000
しわ,ヒアルロン酸注入,ボリュームアップに効果的,50000
しわ,PRP注入,自己血液を使った自然な再生治療,60000
しわ,スレッドリフト,引き上げ効果が高い,80000
しわ,マイクロニードルRF,皮膚深層への刺激でコラーゲン生成,70000
たるみ,HIFU,超音波で筋膜にアプローチ,90000
たるみ,スレッドリフト,糸による物理的なリフト,85000
たるみ,RF（高周波）,熱による皮膚の引き締め,60000
たるみ,ウルセラ,FDA認可のたるみ治療,120000
たるみ,サーマクール,高周波による深部加熱,100000
毛穴,フラクショナルCO2レーザー,レーザーで毛穴と皮膚再生を促進,40000
毛穴,ダーマペン,微細針でコラーゲン生成促進,30000
毛穴,ポテンツァ,微細針＋高周波で毛穴改善,80000
毛穴,ハイドラフェイシャル,毛穴と角質のディープクレンジング,20000
毛穴,カーボンピーリング,炭を用いたピーリングで引き締め,25000
赤み,IPL（フォトフェイシャル）,光による赤み・色ムラの改善,35000
赤み,Vビームレーザー,血管に特化した赤ら顔治療,45000
赤み,ロゼックスゲル,酒さ・赤ら顔に使用,3000
赤み,赤外線治療,赤外線で血行促進,15000
赤み,フラクショナルレーザー,赤みと同時に肌質も改善,60000
色素沈着,トラネキサム酸内服,肝斑・色素沈着に内服,5000
色素沈着,レーザートーニング,レーザーで均一な肌トーンに,30000
色素沈着,ハイドロキノン,メラニン抑制クリーム,4000
色素沈着,ルメッカ,しみやそばかすの改善,35000
色素沈着,ピコトーニング,肝斑に適した微弱レーザー,45000
肌質改善,エレクトロポレーション,成分導入による肌質改善,15000
肌質改善,マッサージピール,皮むけを伴うリフト＆美白,20000
肌質改善,プラズマ治療,殺菌・肌再生効果あり,40000
肌質改善,エクソソーム導入,幹細胞成分による肌修復,70000
肌質改善,水光注射,保湿と美容成分注入,30000
脂肪除去,脂肪溶解注射,脂肪細胞を直接分解,20000
脂肪除去,クールスカルプティング,冷却で脂肪細胞破壊,90000
脂肪除去,脂肪吸引,外科的な脂肪除去,300000
脂肪除去,HIFU（脂肪層）,脂肪層にピンポイント照射,100000
脂肪除去,カベリン注射,植物由来成分の脂肪融解,25000"""

# English keys for the Japanese category column
CATEGORY_KEYS = {
    "wrinkles": "しわ",
    "sagging": "たるみ",
    "pores": "毛穴",
    "redness": "赤み",
    "pigmentation": "色素沈着",
    "skin-quality": "肌質改善",
    "fat-removal": "脂肪除去",
}


@lru_cache
def get_treatments() -> tuple[Treatment, ...]:
    """Parse the catalog rows (header excluded)."""
    rows = TREATMENTS_CSV.splitlines()[1:]
    treatments = []
    for row in rows:
        category, name, description, price = row.split(",")
        treatments.append(
            Treatment(category=category, name=name, description=description, price=int(price))
        )
    return tuple(treatments)


def find_treatments(category: Optional[str] = None) -> list[Treatment]:
    """
    List catalog treatments, optionally for one category.

    The category may be given as the Japanese label or its English key.
    Unknown categories yield an empty list.
    """
    treatments = list(get_treatments())
    if category is None:
        return treatments
    label = CATEGORY_KEYS.get(category, category)
    return [t for t in treatments if t.category == label]
