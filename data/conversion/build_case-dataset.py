import logging

from thematic_map import config
from thematic_map.loaders import download, read_cases

logging.basicConfig(level=config.get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("build_case-dataset")

dirs = config.make_dirs()


# Fetch the daily case counts
# >>>>>>>>>>>>>>>>>>>>>>>>>>>

# RIVM refreshes the file daily, always download it again
path_csv = download(config.DATA_URL, dirs['data'] / config.DATA_URL.split('/')[-1])

# Aggregate to one count per municipality and publication date
cases, date_of_report = read_cases(path_csv)
logger.info(f"Figures of {date_of_report}, publication dates {cases['date'].min().date()} to {cases['date'].max().date()}")


# Save result
# >>>>>>>>>>>

cases.to_csv(dirs['interim'] / config.CASES_FILENAME, index=False, date_format='%Y-%m-%d')
if date_of_report:
    (dirs['interim'] / config.REPORT_DATE_FILENAME).write_text(date_of_report.isoformat())
logger.info(f"Saved {len(cases)} case records to {dirs['interim'] / config.CASES_FILENAME}")
