# Copyright 2025 The Langsniff Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Built-in stopword profiles.

Each entry is one language variant. Entries of the same base language are
ordered most specific first; the last entry of a group is its fallback.
Spelling variants share the common word list of their language and add the
forms that distinguish them. Matching is case-sensitive, so frequent
sentence-initial forms are listed capitalized as well.
"""

from __future__ import annotations

from typing import Any

_ENGLISH = (
    "the of and to in is that it was for on are with as at be this from have or by "
    "not but what all were when we there can an your which their if will would about "
    "into has been who they them these those than then its our should could does did "
    "very also only a he she you me my his her him us had The It In This There They "
    "We You He She A I"
)
_ENGLISH_AMERICAN = (
    "color colors favorite behavior center theater toward program analyze organize "
    "realize gray neighbor honor labor defense catalog traveled jewelry"
)
_ENGLISH_BRITISH = (
    "colour colours favourite behaviour centre theatre towards programme analyse organise "
    "realise grey neighbour honour labour defence catalogue travelled jewellery whilst amongst"
)

_GERMAN = (
    "der die das und ist nicht ein eine einen dem den des mit sich auf auch als aus bei "
    "nach noch wie wir ich sie es zu im oder aber wenn wird werden sind war hat haben "
    "kann nur dass sein"
)
_GERMAN_ASCII = (
    "fuer ueber waehrend waere koennen muessen wuerde schoen natuerlich aehnlich spaeter"
)
_GERMAN_EXTENDED = (
    "für über während wäre können müssen würde schön natürlich ähnlich später daß"
)

_FRENCH = (
    "le la les de des du un une et est en que qui dans pour pas sur au aux avec ce cette "
    "ces il elle ils nous vous sont ont être été avoir fait plus mais ou où son sa ses "
    "leur très aussi comme même après avant sans entre tout tous"
)

_SPANISH = (
    "el la los las de del y en que es por con para una un no se lo su sus al como más "
    "pero le ya muy también está son fue ha sido entre sin sobre este esta estos hay "
    "donde cuando porque todo"
)

_ITALIAN = (
    "il lo la gli le di del della dei delle che è e un una per con non sono ma come "
    "anche più questo questa nel nella alla al si da ha hanno essere stato tra molto "
    "perché quando"
)

_PORTUGUESE = (
    "o os a as de do da dos das e em no na nos nas um uma que é para com não por mais "
    "como mas foi ao se seu sua também são pelo pela está muito entre quando"
)
_PORTUGUESE_BRAZILIAN = (
    "contato ação direção ótimo registro equipe ônibus trem tela celular você vocês"
)
_PORTUGUESE_EUROPEAN = (
    "facto contacto acção direcção óptimo registo equipa autocarro comboio ecrã telemóvel"
)

_DUTCH = (
    "de het een en van in is dat op te zijn met voor niet aan er maar om ook als bij of "
    "uit dan nog wel naar door wat over hij zij ze wij heeft hebben werd worden deze dit "
    "die geen meer"
)

_SWEDISH = (
    "och att det som en på är av för med till den har de inte om ett han men var jag sig "
    "från vi så kan man när år hon under också efter upp andra eller bara mycket"
)

_DANISH = (
    "og at det en den til er som på de med han af for ikke der var mig sig men et har om "
    "vi min havde ham hun nu over da fra du ud sin dem os op hvad eller hvor også efter meget"
)

_NORWEGIAN = (
    "og i det som en på er av for med til den har de ikke om et han men var jeg seg fra "
    "vi så kan man når år hun også etter opp andre eller bare mye hva hvor ble blir"
)

_HUNGARIAN = (
    "a az és hogy nem is egy van meg de csak már ez azt volt még mint vagy kell mert ha "
    "én te ő mi ők lesz után között nagyon amikor amely"
)

_ROMANIAN = (
    "și în de la cu pe nu un o care este sunt pentru mai din ca să se ce a fost fi dar "
    "sau acest această lui ei foarte după"
)

_SLOVAK = (
    "a je na sa v že to s z do ako ale som si sú by po aj pre len už ktorý ktorá keď "
    "alebo tak ešte bol bola od pri veľmi"
)

_SLOVENIAN = (
    "in je na se v da za so z ki pa ne s bi tudi kot to ali iz sem po pri še zelo samo "
    "bil bila lahko kjer kako"
)


def _words(*parts: str) -> list[str]:
    return " ".join(parts).split()


BUILTIN_VARIANTS: list[dict[str, Any]] = [
    {
        "variant_id": "american",
        "base_language": "english",
        "encoding": "american",
        "dictionary": "en_US",
        "words": _words(_ENGLISH, _ENGLISH_AMERICAN),
    },
    {
        "variant_id": "british",
        "base_language": "english",
        "encoding": "british",
        "dictionary": "en_GB",
        "words": _words(_ENGLISH, _ENGLISH_BRITISH),
    },
    {
        "variant_id": "deutsch",
        "base_language": "german",
        "encoding": "ascii",
        "dictionary": "de_DE_ascii",
        "words": _words(_GERMAN, _GERMAN_ASCII),
    },
    {
        "variant_id": "deutsch8",
        "base_language": "german",
        "encoding": "extended",
        "dictionary": "de_DE",
        "words": _words(_GERMAN, _GERMAN_EXTENDED),
    },
    {
        "variant_id": "francais",
        "base_language": "french",
        "dictionary": "fr_FR",
        "words": _words(_FRENCH),
    },
    {
        "variant_id": "castellano",
        "base_language": "spanish",
        "dictionary": "es_ES",
        "words": _words(_SPANISH),
    },
    {
        "variant_id": "italiano",
        "base_language": "italian",
        "dictionary": "it_IT",
        "words": _words(_ITALIAN),
    },
    {
        "variant_id": "brasileiro",
        "base_language": "portuguese",
        "encoding": "brazilian",
        "dictionary": "pt_BR",
        "words": _words(_PORTUGUESE, _PORTUGUESE_BRAZILIAN),
    },
    {
        "variant_id": "portugues",
        "base_language": "portuguese",
        "encoding": "european",
        "dictionary": "pt_PT",
        "words": _words(_PORTUGUESE, _PORTUGUESE_EUROPEAN),
    },
    {
        "variant_id": "nederlands",
        "base_language": "dutch",
        "dictionary": "nl_NL",
        "words": _words(_DUTCH),
    },
    {
        "variant_id": "svenska",
        "base_language": "swedish",
        "dictionary": "sv_SE",
        "words": _words(_SWEDISH),
    },
    {
        "variant_id": "dansk",
        "base_language": "danish",
        "dictionary": "da_DK",
        "words": _words(_DANISH),
    },
    {
        "variant_id": "norsk",
        "base_language": "norwegian",
        "dictionary": "nb_NO",
        "words": _words(_NORWEGIAN),
    },
    {
        "variant_id": "magyar",
        "base_language": "hungarian",
        "dictionary": "hu_HU",
        "words": _words(_HUNGARIAN),
    },
    {
        "variant_id": "romana",
        "base_language": "romanian",
        "dictionary": "ro_RO",
        "words": _words(_ROMANIAN),
    },
    {
        "variant_id": "slovak",
        "base_language": "slovak",
        "dictionary": "sk_SK",
        "words": _words(_SLOVAK),
    },
    {
        "variant_id": "slovenian",
        "base_language": "slovenian",
        "dictionary": "sl_SI",
        "words": _words(_SLOVENIAN),
    },
]
