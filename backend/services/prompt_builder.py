# =============================================================================
# SKIN PROPOSAL BACKEND - PROMPT BUILDER
# =============================================================================
"""
Builds the Gemini prompt for a personalised treatment proposal.
The wording and the catalog text shape the generated report and are kept
exactly as the clinic wrote them.
"""

from models import ScoreSet
from services.skin_scoring import FaceAnnotation
from services.treatments import TREATMENTS_CSV

VISION_SUMMARY_TEMPLATE = """
- 喜びの可能性: {joy}
- 悲しみの可能性: {sorrow}
- 驚きの可能性: {surprise}
- 露出不足の可能性: {under_exposed}
- ぼやけの可能性: {blurred}
- 顔の傾き: {tilt:.2f}度
"""

PROMPT_TEMPLATE = """
あなたは日本で最も信頼されている美容カウンセラーです。
以下の2つの情報をもとに、クライアントにパーソナライズされた美容プランを提案してください。

# 情報1：AIによる肌スコア (100点満点)
- くすみ: {dullness}
- なめらかさ(しわ): {smoothness}
- ハリ(たるみ): {firmness}
- シミ: {spots}
- 毛穴: {pores}

# 情報2：Google Vision APIによる詳細な顔分析データ
{vision_summary}

# 提案可能な治療法リスト
{treatments}

# あなたへの指示
1. まず「AIによる診断結果」として、スコアと分析データを基に、クライアントの肌の状態を総合的に評価してください。特にスコアが低い項目について言及してください。
2. 次に「あなたへの最適な治療プラン」として、スコアが低い悩みを解決するために、治療法リストの中から最も関連性の高い治療法を2つずつ提案してください。
3. 提案する際は、「治療法名」「特徴」「参考価格」を分かりやすくまとめてください。価格には「円」を付けてください。
4. 全体を通して、専門的でありながらも、利用者に寄り添うような温かいトーンで記述してください。
5. 回答は必ずHTML形式で出力してください。診断結果のタイトルは<h3>タグ、各治療法の提案は<div>で囲み、治療法名は<h5>タグ、特徴と価格は<p>タグを使用してください。
"""


def summarize_face(face: FaceAnnotation) -> str:
    """Human-readable bullet list of the raw face attributes."""
    return VISION_SUMMARY_TEMPLATE.format(
        joy=face.joy_likelihood,
        sorrow=face.sorrow_likelihood,
        surprise=face.surprise_likelihood,
        under_exposed=face.under_exposed_likelihood,
        blurred=face.blurred_likelihood,
        tilt=face.tilt_angle,
    )


def build_prompt(scores: ScoreSet, face: FaceAnnotation) -> str:
    """Render the full proposal prompt for one analysed face."""
    return PROMPT_TEMPLATE.format(
        dullness=scores.dullness,
        smoothness=scores.smoothness,
        firmness=scores.firmness,
        spots=scores.spots,
        pores=scores.pores,
        vision_summary=summarize_face(face),
        treatments=TREATMENTS_CSV,
    )
