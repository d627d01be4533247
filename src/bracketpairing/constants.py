# Bracket Pairing
# Copyright (C) 2025  Bracket Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
APP_NAME = "Bracket Pairing"
LOG_LEVEL_ENV_VAR = "BRACKETPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Tournament type keys (config / CLI values)
TYPE_SINGLE_ELIMINATION = "single_elimination"
TYPE_DOUBLE_ELIMINATION = "double_elimination"
TYPE_SWISS = "swiss"

# Losses that knock a participant out of an elimination bracket
SINGLE_ELIMINATION_LOSS_LIMIT = 1
DOUBLE_ELIMINATION_LOSS_LIMIT = 2

# Match id prefixes
MATCH_PREFIX_ROUND = "R"
MATCH_PREFIX_WINNERS = "W"
MATCH_PREFIX_LOSERS = "L"
MATCH_PREFIX_GRAND_FINAL = "GF"

# Grand final reset (double elimination)
DEFAULT_GRAND_FINAL_RESET = True

# Swiss byes award a win unless configured otherwise
DEFAULT_SWISS_BYE_COUNTS_AS_WIN = True

# Tiebreak keys - Swiss ranking among equal win counts
TB_REGISTRATION_ORDER = "registration_order"
TB_FEWEST_LOSSES = "fewest_losses"
TB_NAME = "name"

TIEBREAK_NAMES = {
    TB_REGISTRATION_ORDER: "Registration Order",
    TB_FEWEST_LOSSES: "Fewest Losses",
    TB_NAME: "Name",
}

DEFAULT_SWISS_TIEBREAK = TB_REGISTRATION_ORDER
