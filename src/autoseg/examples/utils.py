"""Sample documents and a console logger for the CLI and demos."""

SAMPLE_PALI = (
    "1. Tena samayena buddho bhagavā verañjāyaṃ viharati naḷerupucimandamūle mahatā "
    "bhikkhusaṅghena saddhiṃ pañcamattehi bhikkhusatehi. Assosi kho verañjo brāhmaṇo – "
    "‘‘samaṇo khalu, bho, gotamo sakyaputto sakyakulā pabbajito verañjāyaṃ viharati "
    "naḷerupucimandamūle mahatā bhikkhusaṅghena saddhiṃ pañcamattehi bhikkhusatehi. "
    "Taṃ kho pana bhavantaṃ gotamaṃ evaṃ kalyāṇo kittisaddo abbhuggato – ‘itipi so "
    "bhagavā arahaṃ sammāsambuddho vijjācaraṇasampanno sugato lokavidū anuttaro "
    "purisadammasārathi satthā devamanussānaṃ buddho bhagavā [bhagavāti (syā.), dī. ni. "
    "1.157, abbhuggatākārena pana sameti]. So imaṃ lokaṃ sadevakaṃ samārakaṃ sabrahmakaṃ "
    "sassamaṇabrāhmaṇiṃ pajaṃ sadevamanussaṃ sayaṃ abhiññā sacchikatvā pavedeti. So "
    "dhammaṃ deseti ādikalyāṇaṃ majjhekalyāṇaṃ pariyosānakalyāṇaṃ sātthaṃ sabyañjanaṃ; "
    "kevalaparipuṇṇaṃ parisuddhaṃ brahmacariyaṃ pakāseti; sādhu kho pana tathārūpānaṃ "
    "arahataṃ dassanaṃ hotī’’’ti."
)

SAMPLE_MYANMAR = "၁။ တေန သမယေန ဗုဒ္ဓေါ ဘဂဝါ ဝေရဉ္ဇာယံ ဝိဟရတိ။"

SAMPLE_THAI = "อุทฺทิฏฺฐา"

SAMPLES = {
    "pali": SAMPLE_PALI,
    "myanmar": SAMPLE_MYANMAR,
    "thai": SAMPLE_THAI,
}


class SimpleConsoleLogger:
    """Simple console logger for the CLI and examples."""

    def __init__(self, stream=None):
        self.stream = stream

    def _emit(self, level: str, msg: str, kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)
        
    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)
        
    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)
